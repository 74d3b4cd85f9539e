from __future__ import annotations
from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
	from .schemas import FormField


class BulletinError(Exception):
	"""Base class for errors raised by the appreciation workflow."""


class FormValidationError(BulletinError):
	def __init__(self, errors: Dict["FormField", str]) -> None:
		self.errors = dict(errors)
		super().__init__(", ".join(f"{field.value}: {msg}" for field, msg in self.errors.items()))


class GenerationError(BulletinError):
	"""The text-generation service did not return a usable comment."""


class InvalidCredentialError(GenerationError):
	"""The API key is missing, rejected, or lacks access to the model."""


class TransientGenerationError(GenerationError):
	"""Any other failure; the user may simply submit again."""


class GenerationInProgress(BulletinError):
	"""A generation is already pending for this browser session."""

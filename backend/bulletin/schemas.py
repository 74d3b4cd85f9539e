from __future__ import annotations
from enum import Enum
from typing import Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Gender(str, Enum):
	BOY = "BOY"
	GIRL = "GIRL"

	@property
	def description(self) -> str:
		return _GENDER_DESCRIPTIONS[self]


class PerformanceLevel(str, Enum):
	EXCELLENT = "EXCELLENT"
	GOOD = "GOOD"
	SATISFACTORY = "SATISFACTORY"
	FRAGILE = "FRAGILE"

	@property
	def description(self) -> str:
		return _PERFORMANCE_DESCRIPTIONS[self]


class CommentTone(str, Enum):
	ENCOURAGING = "ENCOURAGING"
	FORMAL = "FORMAL"
	DIRECT = "DIRECT"

	@property
	def label(self) -> str:
		return _TONE_LABELS[self]


class CommentLength(str, Enum):
	SHORT = "SHORT"
	MEDIUM = "MEDIUM"
	LONG = "LONG"

	@property
	def line_range(self) -> str:
		return _LINE_RANGES[self]


class CommentSection(str, Enum):
	# Declaration order is the order sections appear in the prompt
	COMPORTEMENT = "COMPORTEMENT"
	TRAVAIL = "TRAVAIL"
	NIVEAU = "NIVEAU"
	CONSEILS = "CONSEILS"

	@property
	def label(self) -> str:
		return _SECTION_LABELS[self]


class FormField(str, Enum):
	STUDENT_NAME = "student_name"
	SUBJECT = "subject"
	COMMENT_SECTIONS = "comment_sections"
	COMPORTEMENT = "comportement"
	TRAVAIL = "travail"
	STRENGTHS = "strengths"
	AREAS_FOR_IMPROVEMENT = "areas_for_improvement"


_GENDER_DESCRIPTIONS: Dict[Gender, str] = {
	Gender.BOY: "un garçon",
	Gender.GIRL: "une fille",
}

_PERFORMANCE_DESCRIPTIONS: Dict[PerformanceLevel, str] = {
	PerformanceLevel.EXCELLENT: "Excellent : Très bons résultats, élève moteur et investi.",
	PerformanceLevel.GOOD: "Bon : Des résultats solides et une participation régulière.",
	PerformanceLevel.SATISFACTORY: "Satisfaisant : Niveau correct, mais peut mieux faire en s'investissant davantage.",
	PerformanceLevel.FRAGILE: "Fragile : Des difficultés persistent, un travail plus régulier est nécessaire.",
}

_TONE_LABELS: Dict[CommentTone, str] = {
	CommentTone.ENCOURAGING: "Encourageant et bienveillant",
	CommentTone.FORMAL: "Formel et neutre",
	CommentTone.DIRECT: "Direct et factuel",
}

_LINE_RANGES: Dict[CommentLength, str] = {
	CommentLength.SHORT: "2-3",
	CommentLength.MEDIUM: "3-4",
	CommentLength.LONG: "4-5",
}

_SECTION_LABELS: Dict[CommentSection, str] = {
	CommentSection.COMPORTEMENT: "Comportement",
	CommentSection.TRAVAIL: "Travail / Investissement",
	CommentSection.NIVEAU: "Niveau / Compétences",
	CommentSection.CONSEILS: "Conseils / Progression",
}

# Every section has exactly one free-text detail field
SECTION_FIELDS: Dict[CommentSection, FormField] = {
	CommentSection.COMPORTEMENT: FormField.COMPORTEMENT,
	CommentSection.TRAVAIL: FormField.TRAVAIL,
	CommentSection.NIVEAU: FormField.STRENGTHS,
	CommentSection.CONSEILS: FormField.AREAS_FOR_IMPROVEMENT,
}


class EvaluationInput(BaseModel):
	"""Current values of the evaluation form for one student.

	Accepts both snake_case and the camelCase keys the browser form sends.
	"""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	student_name: str = ""
	subject: str = ""
	gender: Gender = Gender.BOY
	performance_level: PerformanceLevel = PerformanceLevel.GOOD
	comportement: str = ""
	travail: str = ""
	strengths: str = ""
	areas_for_improvement: str = ""
	tone: CommentTone = CommentTone.ENCOURAGING
	comment_sections: Set[CommentSection] = Field(default_factory=lambda: set(CommentSection))
	comment_length: CommentLength = CommentLength.MEDIUM

	def detail(self, field: FormField) -> str:
		"""Return the trimmed text of a free-text field."""
		return (getattr(self, field.value) or "").strip()

	def selected_sections(self) -> List[CommentSection]:
		return [section for section in CommentSection if section in self.comment_sections]


class AppreciationResponse(BaseModel):
	student_name: str
	subject: str
	generated_text: str
	saved_count: int


class SavedRecord(BaseModel):
	student_name: str
	subject: str
	generated_text: str


class PromptPreview(BaseModel):
	prompt: str


class CredentialRequest(BaseModel):
	api_key: str = Field(validation_alias="apiKey", serialization_alias="apiKey")

	model_config = ConfigDict(populate_by_name=True)


class CredentialStatus(BaseModel):
	has_key: bool


class Option(BaseModel):
	value: str
	label: str


class FormOptions(BaseModel):
	genders: List[Option]
	performance_levels: List[Option]
	tones: List[Option]
	sections: List[Option]
	lengths: List[Option]
	defaults: EvaluationInput

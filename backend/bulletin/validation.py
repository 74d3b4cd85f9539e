from __future__ import annotations
from typing import Dict

from .schemas import CommentSection, EvaluationInput, FormField, SECTION_FIELDS


ValidationErrors = Dict[FormField, str]


NAME_REQUIRED = "Le prénom de l'élève est requis."
SUBJECT_REQUIRED = "La matière est requise."
SECTION_REQUIRED = "Veuillez sélectionner au moins un volet."

SECTION_DETAIL_REQUIRED: Dict[CommentSection, str] = {
	CommentSection.COMPORTEMENT: "Veuillez décrire le comportement pour ce volet.",
	CommentSection.TRAVAIL: "Veuillez décrire l'investissement pour ce volet.",
	CommentSection.NIVEAU: "Veuillez décrire les points forts pour ce volet.",
	CommentSection.CONSEILS: "Veuillez décrire les axes d'amélioration pour ce volet.",
}


def validate(form: EvaluationInput, *, allow_auto_sections: bool = False) -> ValidationErrors:
	"""Check the form and map each invalid field to a message.

	Every rule runs regardless of the others, so the caller gets the full
	set of problems in one pass. With ``allow_auto_sections`` a selected
	section may be left empty; the prompt then asks the model to write it.
	"""
	errors: ValidationErrors = {}
	if not form.detail(FormField.STUDENT_NAME):
		errors[FormField.STUDENT_NAME] = NAME_REQUIRED
	if not form.detail(FormField.SUBJECT):
		errors[FormField.SUBJECT] = SUBJECT_REQUIRED
	if not form.comment_sections:
		errors[FormField.COMMENT_SECTIONS] = SECTION_REQUIRED
	if not allow_auto_sections:
		for section in form.selected_sections():
			field = SECTION_FIELDS[section]
			if not form.detail(field):
				errors[field] = SECTION_DETAIL_REQUIRED[section]
	return errors


from __future__ import annotations
from typing import Dict, List, Tuple

from .schemas import CommentSection, EvaluationInput, FormField, SECTION_FIELDS


# Wording used when the class teacher wrote details for a section
_DETAIL_HEADINGS: Dict[CommentSection, str] = {
	CommentSection.COMPORTEMENT: "Comportement en classe",
	CommentSection.TRAVAIL: "Investissement et méthode de travail",
	CommentSection.NIVEAU: "Points forts et compétences",
	CommentSection.CONSEILS: "Axes d'amélioration et conseils",
}


def _split_sections(form: EvaluationInput) -> Tuple[List[str], List[str]]:
	with_details: List[str] = []
	to_generate: List[str] = []
	for section in form.selected_sections():
		text = form.detail(SECTION_FIELDS[section])
		if text:
			with_details.append(f'- {_DETAIL_HEADINGS[section]} (détails fournis) : "{text}"')
		else:
			to_generate.append(section.label)
	return with_details, to_generate


def _details_block(form: EvaluationInput) -> str:
	with_details, to_generate = _split_sections(form)
	blocks: List[str] = []
	if with_details:
		blocks.append(
			"Voici les détails fournis par l'enseignant à intégrer impérativement :\n"
			+ "\n".join(with_details)
		)
	if to_generate:
		blocks.append(
			f"En te basant sur le niveau général de l'élève (\"{form.performance_level.description}\"), "
			"rédige également des commentaires pour les volets suivants, pour lesquels aucun détail n'a été fourni :\n"
			+ "\n".join(f"- {label}" for label in to_generate)
		)
	return "\n\n".join(blocks)


def build_prompt(form: EvaluationInput) -> str:
	"""Assemble the instruction sent to the model for one report-card comment.

	Same form in, same string out. Sections are emitted in canonical order;
	the block listing sections to auto-generate is omitted when every
	selected section carries details.
	"""
	name = form.detail(FormField.STUDENT_NAME)
	subject = form.detail(FormField.SUBJECT)
	header = (
		"Agis en tant que professeur principal expérimenté et pédagogue. "
		"Rédige une appréciation personnalisée, constructive et nuancée pour le bulletin scolaire d'un élève.\n\n"
		"Informations sur l'élève :\n"
		f"- Prénom : {name}\n"
		f"- Genre : {form.gender.description}. Tu dois impérativement faire les accords en genre "
		"(masculin/féminin) nécessaires dans toute l'appréciation.\n"
		f"- Matière : {subject}\n"
		f"- Description du niveau général : \"{form.performance_level.description}\""
	)
	instructions = (
		"Consignes pour la rédaction :\n"
		f"1. Le ton de l'appréciation doit être impérativement : **{form.tone.label}**.\n"
		f"2. L'appréciation doit faire environ **{form.comment_length.line_range} lignes**.\n"
		"3. Structure l'appréciation en abordant TOUS les volets demandés dans un ordre logique et fluide. "
		"Ne mentionne pas explicitement le nom des volets (ex: \"Concernant son comportement...\"). "
		"L'ensemble doit être un paragraphe unique et cohérent.\n"
		"4. Commence directement par l'appréciation, sans formule d'introduction comme \"Voici une proposition :\".\n"
		"5. Personnalise le commentaire en utilisant le prénom de l'élève au moins une fois de manière naturelle.\n"
		"6. Assure-toi que le commentaire est cohérent avec toutes les informations fournies.\n"
		"7. Transforme les \"axes d'amélioration\" en conseils positifs et réalisables plutôt qu'en reproches."
	)
	parts = [header]
	details = _details_block(form)
	if details:
		parts.append(details)
	parts.append(instructions)
	parts.append("Ne retourne que le texte de l'appréciation finale.")
	return "\n\n".join(parts)

from __future__ import annotations
from typing import Dict, List

from .schemas import (
	CommentLength,
	CommentSection,
	CommentTone,
	EvaluationInput,
	FormField,
	FormOptions,
	Gender,
	Option,
	PerformanceLevel,
)


# Quick-insert keywords offered under each detail field
SUGGESTION_KEYWORDS: Dict[FormField, List[str]] = {
	FormField.COMPORTEMENT: [
		"attentif", "sérieux", "calme", "respectueux", "bavard", "agité",
		"dispersé", "participe", "discret", "moteur", "agréable",
	],
	FormField.TRAVAIL: [
		"régulier", "investi", "autonome", "volontaire", "approfondi", "superficiel",
		"irrégulier", "manque de méthode", "soigné", "brouillon", "pertinent",
	],
	FormField.STRENGTHS: [
		"curiosité", "rigueur", "analyse", "logique", "créativité", "participation active",
		"esprit de synthèse", "aisance à l'oral", "bonnes bases", "solides compétences",
	],
	FormField.AREAS_FOR_IMPROVEMENT: [
		"concentration", "apprendre les leçons", "soigner le travail", "participer davantage",
		"oser poser des questions", "gagner en autonomie", "approfondir la réflexion", "être plus régulier",
	],
}


_PERFORMANCE_LABELS = {
	PerformanceLevel.EXCELLENT: "Excellent",
	PerformanceLevel.GOOD: "Bon",
	PerformanceLevel.SATISFACTORY: "Satisfaisant",
	PerformanceLevel.FRAGILE: "Fragile / À améliorer",
}

_TONE_SHORT_LABELS = {
	CommentTone.ENCOURAGING: "Encourageant",
	CommentTone.FORMAL: "Formel",
	CommentTone.DIRECT: "Direct",
}

_GENDER_LABELS = {Gender.BOY: "Garçon", Gender.GIRL: "Fille"}

_LENGTH_LABELS = {
	CommentLength.SHORT: "Courte",
	CommentLength.MEDIUM: "Moyenne",
	CommentLength.LONG: "Détaillée",
}


def form_options() -> FormOptions:
	return FormOptions(
		genders=[Option(value=g.value, label=_GENDER_LABELS[g]) for g in Gender],
		performance_levels=[Option(value=p.value, label=_PERFORMANCE_LABELS[p]) for p in PerformanceLevel],
		tones=[Option(value=t.value, label=_TONE_SHORT_LABELS[t]) for t in CommentTone],
		sections=[Option(value=s.value, label=s.label) for s in CommentSection],
		lengths=[
			Option(value=l.value, label=f"{_LENGTH_LABELS[l]} ({l.line_range} lignes)")
			for l in CommentLength
		],
		defaults=EvaluationInput(),
	)

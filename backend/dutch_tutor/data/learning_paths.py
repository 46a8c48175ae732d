"""
Built-in learning paths.
"""
from dutch_tutor.models.cefr import CEFRLevel
from dutch_tutor.models.learning_path import LearningPath, LearningPathStep


LEARNING_PATHS: list[LearningPath] = [
    LearningPath(
        id="inburgering-writing",
        name="Inburgeringsexamen Schrijfvaardigheid",
        description="Voorbereiding op het schrijfgedeelte van het inburgeringsexamen",
        target_level=CEFRLevel.B1,
        steps=[
            LearningPathStep(
                id="step-1",
                title="Basis Grammatica",
                description="Leer de fundamenten van Nederlandse grammatica",
                exercise_ids=["de-het-contextual", "plural-forms", "prepositions"],
            ),
            LearningPathStep(
                id="step-2",
                title="Zinsbouw en Woordvolgorde",
                description="Oefen met correcte zinsbouw",
                exercise_ids=["sentence-jigsaw", "inversion-practice", "subordinate-clause-sov"],
            ),
            LearningPathStep(
                id="step-3",
                title="Werkwoordstijden",
                description="Beheers perfectum en imperfectum",
                exercise_ids=["perfectum-practice", "imperfectum-practice"],
            ),
            LearningPathStep(
                id="step-4",
                title="Formeel Schrijven",
                description="Leer formele taal voor officiële documenten",
                exercise_ids=["register-switching", "error-correction"],
            ),
        ],
    ),
    LearningPath(
        id="daily-conversation",
        name="Dagelijks Gesprek",
        description="Verbeter je gespreksvaardigheid voor dagelijks gebruik",
        target_level=CEFRLevel.A2,
        steps=[
            LearningPathStep(
                id="step-1",
                title="Basis Woordenschat",
                description="Leer veelgebruikte woorden en uitdrukkingen",
                exercise_ids=["idioms-context", "collocations", "conversation-starters"],
            ),
            LearningPathStep(
                id="step-2",
                title="Sociale Situaties",
                description="Leer wat je zegt in verschillende sociale situaties",
                exercise_ids=["social-scripts", "speech-acts"],
            ),
            LearningPathStep(
                id="step-3",
                title="Modale Partikels",
                description="Begrijp de nuances van Nederlandse partikels",
                exercise_ids=["modal-particles"],
            ),
        ],
    ),
]


def get_learning_path_definition(path_id: str):
    """Pristine definition of a path, None when unknown."""
    for path in LEARNING_PATHS:
        if path.id == path_id:
            return path.model_copy(deep=True)
    return None

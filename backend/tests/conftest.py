"""
Pytest configuration and fixtures for tests.
"""
import pytest
from datetime import datetime
from fastapi.testclient import TestClient

from dutch_tutor.core.dependencies import get_repository
from dutch_tutor.main import app
from dutch_tutor.models.exercise import ExerciseData
from dutch_tutor.repositories.key_value import InMemoryRepository


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryRepository()


@pytest.fixture
def client(repository):
    """Test client whose learner state lives in the repository fixture."""
    app.dependency_overrides[get_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def fixed_now():
    return datetime(2025, 3, 14, 10, 30)


@pytest.fixture
def sample_exercise_data():
    """Raw exercise payload (camelCase, as sent by the frontend) with one question per type."""
    return {
        "introduction": "Oefen met de en het.",
        "explanation": "De meeste woorden krijgen 'de'.",
        "questions": [
            {
                "id": "q1",
                "type": "fill",
                "questionText": "Ik woon in ___ huis.",
                "correctAnswer": "een",
                "explanation": "Huis is een het-woord, maar hier is het onbepaald."
            },
            {
                "id": "q2",
                "type": "multiple-choice",
                "questionText": "Welk lidwoord hoort bij 'boek'?",
                "options": ["de", "het"],
                "correctAnswer": "het"
            },
            {
                "id": "q3",
                "type": "checkbox",
                "questionText": "Welke woorden zijn de-woorden?",
                "options": ["tafel", "huis", "stoel", "kind"],
                "correctAnswer": ["tafel", "stoel"]
            },
            {
                "id": "q4",
                "type": "swipe-sort",
                "questionText": "Sorteer de woorden.",
                "swipeTargets": ["de", "het"],
                "swipeItems": [
                    {"word": "fiets", "correctTarget": "de"},
                    {"word": "meisje", "correctTarget": "het"},
                    {"word": "auto", "correctTarget": "de"}
                ],
                "correctAnswer": ["de", "het", "de"]
            },
            {
                "id": "q5",
                "type": "memory-match",
                "questionText": "Zoek de paren.",
                "memoryPairs": [
                    {"card1": "hond", "card2": "dog"},
                    {"card1": "kat", "card2": "cat"}
                ],
                "correctAnswer": ["hond-dog", "kat-cat"]
            },
            {
                "id": "q6",
                "type": "jigsaw",
                "questionText": "Zet de zin in de goede volgorde.",
                "jigsawPieces": ["ik", "naar", "ga", "huis"],
                "jigsawCorrectOrder": [0, 2, 1, 3],
                "correctAnswer": ["ik", "ga", "naar", "huis"]
            },
            {
                "id": "q7",
                "type": "dictation",
                "questionText": "Schrijf op wat je hoort.",
                "dictationText": "Hallo wereld",
                "correctAnswer": "hallo wereld"
            },
            {
                "id": "q8",
                "type": "image-description",
                "questionText": "Wat zie je?",
                "imageUrl": "https://example.com/kat.png",
                "correctAnswer": "een kat"
            },
            {
                "id": "q9",
                "type": "transformation",
                "questionText": "Zet in de voltooide tijd: Ik loop.",
                "sourceTense": "present",
                "targetTense": "perfectum",
                "sourceText": "Ik loop.",
                "correctAnswer": "ik heb gelopen"
            },
            {
                "id": "q10",
                "type": "word-math",
                "questionText": "fiets + pad = ?",
                "wordMathParts": [{"part1": "fiets", "part2": "pad", "result": "fietspad"}],
                "correctAnswer": "fiets|pad"
            }
        ]
    }


@pytest.fixture
def sample_exercise(sample_exercise_data):
    return ExerciseData.model_validate(sample_exercise_data)


@pytest.fixture
def all_correct_answers():
    return {
        "q1": "een",
        "q2": "het",
        "q3": ["stoel", "tafel"],
        "q4": ["de", "het", "de"],
        "q5": ["hond-dog", "kat-cat"],
        "q6": ["0", "2", "1", "3"],
        "q7": "Hallo, wereld!",
        "q8": "Een kat",
        "q9": "Ik heb gelopen",
        "q10": "fiets | pad"
    }

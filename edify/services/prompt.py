from typing import Optional

from edify.core import config


def build_system_instruction(grounding: Optional[str] = None) -> str:
    if grounding:
        return (
            "You are an AI learning assistant. Help the user understand and learn "
            f"from this content: {grounding[:config.GROUNDING_CHARS]}..."
        )
    return "You are an AI learning assistant. Help the user with their questions."


def summary_prompt(content: str) -> str:
    return (
        "Please provide a comprehensive summary of this content, highlighting the key points, "
        "main themes, and important takeaways:\n\n"
        f"{content[:config.SOURCE_CHARS]}"
    )


def flashcards_prompt(content: str) -> str:
    return (
        f"Create {config.FLASHCARD_COUNT} flashcards from this content. "
        "Return them as a JSON array with 'question' and 'answer' fields. "
        'Format: [{"question": "...", "answer": "..."}]\n\n'
        f"{content[:config.SOURCE_CHARS]}"
    )


def quiz_prompt(content: str) -> str:
    return (
        f"Create a {config.QUIZ_COUNT}-question multiple choice quiz from this content. "
        "Return as JSON array with 'question', 'options' (array of 4 choices), "
        "and 'correct' (index of correct answer). "
        'Format: [{"question": "...", "options": ["A", "B", "C", "D"], "correct": 0}]\n\n'
        f"{content[:config.SOURCE_CHARS]}"
    )

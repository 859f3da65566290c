# fixed content returned instead of live generation
# DEMO_* : no credentials or no source content, nothing was attempted
# FALLBACK_* : a call was attempted and failed (or its output could not be parsed)
# builders return fresh lists so callers can mutate what they get

from typing import List

from edify.core.errors import ClassifiedError
from edify.schemas.artifacts import Flashcard, QuizQuestion

DEMO_SUMMARY = (
    "This is a demo summary. Upload real content and configure your API key to generate "
    "AI-powered summaries of your videos and documents."
)

FALLBACK_SUMMARY = (
    "This content contains educational material that can be used for learning purposes. "
    "Key concepts include understanding the main topics, extracting important information, "
    "and creating study materials for better comprehension."
)


def summary_fallback(error: ClassifiedError) -> str:
    return (
        f"Unable to generate AI summary due to: {error.message}. {error.suggestion}\n\n"
        f"Fallback Summary:\n{FALLBACK_SUMMARY}"
    )


def unconfigured_flashcards() -> List[Flashcard]:
    return [
        Flashcard(question="Demo Question 1", answer="Configure your API key to generate real flashcards"),
        Flashcard(
            question="Demo Question 2",
            answer="Upload content and set up AI to create personalized study materials",
        ),
    ]


def demo_flashcards() -> List[Flashcard]:
    return [
        Flashcard(question="What is EdiFy?", answer="An AI-powered learning platform for creating study materials"),
        Flashcard(
            question="How does it work?",
            answer="Upload content and let AI generate summaries, flashcards, and quizzes",
        ),
    ]


def fallback_flashcards() -> List[Flashcard]:
    return [
        Flashcard(
            question="What is the main topic of this content?",
            answer="The content focuses on learning and understanding key concepts from the uploaded material.",
        ),
        Flashcard(
            question="What are the key learning objectives?",
            answer="To extract important information and create study materials for better comprehension.",
        ),
        Flashcard(
            question="How can this content be applied?",
            answer="The concepts can be used to enhance understanding and retention of the subject matter.",
        ),
    ]


def unconfigured_quiz() -> List[QuizQuestion]:
    return [
        QuizQuestion(
            question="What do you need to generate real quizzes?",
            options=["A valid API key", "Internet connection", "Uploaded content", "All of the above"],
            correct=3,
        ),
    ]


def demo_quiz() -> List[QuizQuestion]:
    return [
        QuizQuestion(
            question="What is the main purpose of EdiFy?",
            options=["Entertainment", "AI-powered learning", "File storage", "Video streaming"],
            correct=1,
        ),
    ]


def fallback_quiz() -> List[QuizQuestion]:
    return [
        QuizQuestion(
            question="What type of content are you studying?",
            options=["Educational material", "Entertainment", "News article", "Technical documentation"],
            correct=0,
        ),
        QuizQuestion(
            question="What is the purpose of creating study materials?",
            options=["To pass time", "To enhance learning", "To create complexity", "To avoid studying"],
            correct=1,
        ),
    ]

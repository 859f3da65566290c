# stand-in for real transcription / document parsing


def extract_content(resource_name: str) -> str:
    return (
        f"Content from {resource_name}. This is sample content that would be extracted from "
        "the uploaded video or document. In a production app, this would involve video "
        "transcription, document parsing, etc."
    )

"""Prompt templates for interview and quiz question generation."""

from app.models.request_models import QuestionType


INTERVIEW_SYSTEM_PROMPT = """You are an expert interview coach. Generate exactly {count} diverse, relevant interview questions based on the provided job description.
Cover various aspects: technical skills, behavioral questions, situational questions, company culture fit, problem-solving, leadership, and role-specific competencies.
Return ONLY a JSON array of questions, no additional text."""

INTERVIEW_USER_TEMPLATE = """Generate {count} interview questions for this job description:

{job_description}

Format: ["Question 1", "Question 2", ...]"""


QUIZ_SYSTEM_PROMPT = """You are an expert quiz creator. Generate exactly {count} multiple-choice quiz questions based on the provided job description.
Each question should test knowledge, skills, or concepts relevant to the role.
Return ONLY a JSON array where each item has: question, options (array of 4 choices), correctAnswer (the correct option text)."""

QUIZ_USER_TEMPLATE = """Generate {count} quiz questions for this job description:

{job_description}

Format: [{{"question": "...", "options": ["A", "B", "C", "D"], "correctAnswer": "A"}}]"""


def build_question_prompts(
    job_description: str,
    question_type: QuestionType,
    count: int = 200,
) -> tuple[str, str]:
    """Return the (system, user) prompt pair for the given question type."""
    if question_type is QuestionType.INTERVIEW:
        system_template, user_template = INTERVIEW_SYSTEM_PROMPT, INTERVIEW_USER_TEMPLATE
    else:
        system_template, user_template = QUIZ_SYSTEM_PROMPT, QUIZ_USER_TEMPLATE

    return (
        system_template.format(count=count),
        user_template.format(count=count, job_description=job_description),
    )

"""Quiz Templates - Prompts e constantes para geracao de questoes e feedback."""

from ..models.schemas import QUESTIONS_PER_QUIZ, OPTIONS_PER_QUESTION, GenerationRequest, Quiz

# =============================================================================
# CONSTANTES
# =============================================================================

NO_SUB_SKILLS_PLACEHOLDER = "no specific subskills"

FEEDBACK_UNAVAILABLE = (
    "Feedback is not available right now. Review the explanations of the questions "
    "you missed and try the quiz again."
)

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

QUIZ_GENERATION_PROMPT = """Generate {num_questions} {difficulty} level multiple choice questions on the topic: "{skill}". Include subskills: {sub_skills}.
Each question must have exactly {num_options} distinct options.
Format the output strictly as a JSON array of objects with these fields:
- prompt: string
- options: array of strings
- answer: string (must match one of the options)
- explanation: string
Return only the JSON array, without any additional text."""


FEEDBACK_PROMPT = """You are a tutor reviewing a {difficulty} level multiple choice quiz.
The learner scored {score} out of {total}.

QUESTIONS AND ANSWERS:
{review}

Write short, encouraging feedback in plain text (no markdown, no JSON):
1. Summarize how the learner did.
2. Point out the concepts behind the missed questions.
3. Suggest what to study next."""


QUESTION_REVIEW_LINE = """Q{number}: {prompt}
  Learner answer: {user_answer} ({verdict})
  Correct answer: {answer}
  Explanation: {explanation}"""


# =============================================================================
# BUILDERS
# =============================================================================


def build_generation_prompt(request: GenerationRequest) -> str:
    """Monta o prompt de geracao de quiz.

    Funcao pura e deterministica: mesma request, mesmo texto.

    Args:
        request: Skill, sub-skills e dificuldade pedidas

    Returns:
        Prompt pronto para o gerador
    """
    sub_skills = (
        ", ".join(request.sub_skills) if request.sub_skills else NO_SUB_SKILLS_PLACEHOLDER
    )
    return QUIZ_GENERATION_PROMPT.format(
        num_questions=QUESTIONS_PER_QUIZ,
        num_options=OPTIONS_PER_QUESTION,
        difficulty=request.difficulty.value,
        skill=request.skill_name,
        sub_skills=sub_skills,
    )


def build_feedback_prompt(quiz: Quiz, user_answers: list[str], score: int) -> str:
    """Monta o prompt de feedback qualitativo para uma submissao ja pontuada."""
    lines = []
    for number, (question, user_answer) in enumerate(
        zip(quiz.questions, user_answers, strict=True), start=1
    ):
        lines.append(
            QUESTION_REVIEW_LINE.format(
                number=number,
                prompt=question.prompt,
                user_answer=user_answer,
                verdict="correct" if user_answer == question.answer else "incorrect",
                answer=question.answer,
                explanation=question.explanation or "-",
            )
        )

    return FEEDBACK_PROMPT.format(
        difficulty=quiz.difficulty.value,
        score=score,
        total=len(quiz.questions),
        review="\n".join(lines),
    )

# =============================================================================
# TESTES - Quiz Prompt Templates
# =============================================================================
# Testes unitarios para construcao dos prompts de geracao e feedback
# =============================================================================


class TestBuildGenerationPrompt:
    """Testes para prompt de geracao."""

    def test_includes_skill_difficulty_and_count(self):
        """Verifica skill, dificuldade e numero de questoes no prompt."""
        from quiz.models.enums import Difficulty
        from quiz.models.schemas import GenerationRequest
        from quiz.prompts import build_generation_prompt

        request = GenerationRequest(skill_name="Python", difficulty=Difficulty.HARD)
        prompt = build_generation_prompt(request)

        assert "Generate 5 Hard level multiple choice questions" in prompt
        assert '"Python"' in prompt

    def test_joins_sub_skills_in_order(self):
        """Verifica sub-skills separadas por virgula, na ordem."""
        from quiz.models.enums import Difficulty
        from quiz.models.schemas import GenerationRequest
        from quiz.prompts import build_generation_prompt

        request = GenerationRequest(
            skill_name="SQL",
            sub_skills=("joins", "indexes", "window functions"),
            difficulty=Difficulty.MEDIUM,
        )
        prompt = build_generation_prompt(request)

        assert "Include subskills: joins, indexes, window functions." in prompt

    def test_placeholder_when_no_sub_skills(self):
        """Verifica texto sentinela quando nao ha sub-skills."""
        from quiz.models.enums import Difficulty
        from quiz.models.schemas import GenerationRequest
        from quiz.prompts import NO_SUB_SKILLS_PLACEHOLDER, build_generation_prompt

        request = GenerationRequest(skill_name="Go", difficulty=Difficulty.EASY)
        prompt = build_generation_prompt(request)

        assert f"Include subskills: {NO_SUB_SKILLS_PLACEHOLDER}." in prompt

    def test_mandates_json_fields(self):
        """Verifica formato JSON exigido com os 4 campos."""
        from quiz.models.enums import Difficulty
        from quiz.models.schemas import GenerationRequest
        from quiz.prompts import build_generation_prompt

        prompt = build_generation_prompt(
            GenerationRequest(skill_name="Go", difficulty=Difficulty.EASY)
        )

        assert "JSON array of objects" in prompt
        for field in ("prompt: string", "options: array of strings", "answer: string", "explanation: string"):
            assert field in prompt
        assert "exactly 4 distinct options" in prompt

    def test_deterministic(self):
        """Verifica que a mesma request gera o mesmo prompt."""
        from quiz.models.enums import Difficulty
        from quiz.models.schemas import GenerationRequest
        from quiz.prompts import build_generation_prompt

        request = GenerationRequest(skill_name="Rust", sub_skills=("ownership",), difficulty=Difficulty.HARD)

        assert build_generation_prompt(request) == build_generation_prompt(request)

    def test_request_requires_skill_name(self):
        """Verifica rejeicao de skill vazia."""
        import pytest
        from pydantic import ValidationError

        from quiz.models.schemas import GenerationRequest

        with pytest.raises(ValidationError):
            GenerationRequest(skill_name="", difficulty="Easy")


class TestBuildFeedbackPrompt:
    """Testes para prompt de feedback."""

    def test_includes_score_and_review(self, sample_quiz):
        """Verifica score e revisao de cada questao."""
        from quiz.prompts import build_feedback_prompt

        answers = ["A", "A", "A", "A", "A"]
        prompt = build_feedback_prompt(sample_quiz, answers, 2)

        assert "scored 2 out of 5" in prompt
        assert "Q1: Which keyword defines a function in Python?" in prompt
        assert "Learner answer: A (correct)" in prompt
        assert "Learner answer: A (incorrect)" in prompt
        assert "Correct answer: D" in prompt

    def test_mentions_difficulty(self, sample_quiz):
        """Verifica dificuldade do quiz no prompt."""
        from quiz.prompts import build_feedback_prompt

        prompt = build_feedback_prompt(sample_quiz, ["A", "B", "A", "C", "D"], 5)

        assert "Easy level" in prompt

"""Quiz Scoring Engine - Motor de pontuacao e resumo de desempenho."""

from collections.abc import Sequence

from ..models.schemas import QUESTIONS_PER_QUIZ, EvaluationResult, PerformanceSummary, Question


class QuizScoringEngine:
    """Motor de pontuacao deterministico para quizzes.

    O score e bruto: numero de acertos, de 0 ao total de questoes (5).
    Comparacao exata e case-sensitive com a alternativa correta, sem
    credito parcial. Percentual e so apresentacao (score / total * 100).

    Example:
        >>> engine = QuizScoringEngine()
        >>> engine.calculate_score(questions, ["A", "B", "A", "C", "D"])
        5
        >>> engine.to_percentage(4, 5)
        80.0
    """

    def calculate_score(self, questions: Sequence[Question], answers: Sequence[str]) -> int:
        """Conta quantas respostas batem exatamente com a alternativa correta.

        Args:
            questions: Questoes do quiz, em ordem
            answers: Respostas do usuario, na mesma ordem

        Returns:
            Numero de acertos (0 ate len(questions))
        """
        if len(questions) != len(answers):
            raise ValueError(
                f"Numero de respostas ({len(answers)}) diferente do numero de perguntas ({len(questions)})"
            )

        return sum(
            1
            for question, answer in zip(questions, answers, strict=True)
            if self.evaluate_answer(question, answer)
        )

    def evaluate_answer(self, question: Question, answer: str) -> bool:
        """Avalia uma resposta individual (igualdade exata, case-sensitive)."""
        return answer == question.answer

    @staticmethod
    def to_percentage(score: int, total: int = QUESTIONS_PER_QUIZ) -> float:
        """Converte score bruto em percentual (0-100)."""
        if total <= 0:
            return 0.0
        return score / total * 100

    def summarize(
        self, results: Sequence[EvaluationResult], total: int = QUESTIONS_PER_QUIZ
    ) -> PerformanceSummary:
        """Calcula media, melhor e pior score sobre todos os resultados.

        Args:
            results: Resultados do usuario
            total: Score maximo de cada quiz

        Returns:
            PerformanceSummary (zerado se nao houver resultados)
        """
        if not results:
            return PerformanceSummary()

        scores = [r.score for r in results]
        average = sum(scores) / len(scores)
        best = max(scores)
        worst = min(scores)

        return PerformanceSummary(
            total_quizzes=len(scores),
            average_raw_score=round(average, 2),
            average_percent_score=round(self.to_percentage(average, total), 2),
            best_raw_score=best,
            worst_raw_score=worst,
            best_percent_score=round(self.to_percentage(best, total), 2),
            worst_percent_score=round(self.to_percentage(worst, total), 2),
        )

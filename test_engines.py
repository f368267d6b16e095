"""
Healthspan Survey — Unit Tests
All scoring functions must be numerically verified.
Run with: pytest test_engines.py -v
"""

import pytest
from dataclasses import asdict, replace

from answer_record import AnswerRecord


def healthy_male() -> AnswerRecord:
    # Scenario A: every answer at its best value
    return AnswerRecord(
        age=76, sex="male", smoking="never", alcohol="none", exercise="daily",
        sleep="7_8", chronic_count=0, meds="no", stress="low",
    )


def high_risk_female() -> AnswerRecord:
    # Scenario B: every answer at its worst value
    return AnswerRecord(
        age=82, sex="female", smoking="often", alcohol="daily", exercise="none",
        sleep="<5", chronic_count=2, meds="yes", stress="high",
    )


def zero_score_other() -> AnswerRecord:
    # Scenario C: 10 - 15 - 10 + 5 + 5 + 5 + 0 == 0
    return AnswerRecord(
        age=40, sex="other", smoking="rare", alcohol="daily", exercise="none",
        sleep="9plus", chronic_count=1, meds="no", stress="mid",
    )


# ══════════════════════════════════════════════════════════════════════════════
# SCORE TABLE TESTS
# ══════════════════════════════════════════════════════════════════════════════

class TestScoreTable:

    def setup_method(self):
        from score_table import ScoreTable
        self.table = ScoreTable()

    def test_known_values(self):
        assert self.table.lookup("smoking", "never") == 20
        assert self.table.lookup("alcohol", "daily") == -15
        assert self.table.lookup("exercise", "week3_5") == 15
        assert self.table.lookup("sleep", "<5") == -10
        assert self.table.lookup("meds", "yes") == -5
        assert self.table.lookup("stress", "mid") == 0

    def test_unknown_value_scores_zero(self):
        assert self.table.lookup("smoking", "unknown") == 0

    def test_missing_value_scores_zero(self):
        assert self.table.lookup("sleep", None) == 0
        assert self.table.lookup("sleep", "") == 0

    def test_unknown_category_scores_zero(self):
        assert self.table.lookup("diet", "vegan") == 0

    def test_chronic_bands(self):
        assert self.table.chronic_points(0) == 20
        assert self.table.chronic_points(1) == 5
        assert self.table.chronic_points(2) == -10
        assert self.table.chronic_points(5) == -10

    def test_chronic_missing_count_is_none_band(self):
        assert self.table.chronic_points(None) == 20

    def test_table_is_read_only(self):
        from score_table import SCORING
        with pytest.raises(TypeError):
            SCORING["smoking"]["never"] = 100

    def test_answer_enums_match_table(self):
        from schemas import Smoking, Alcohol, Exercise, Sleep, Meds, Stress
        enums = {
            "smoking": Smoking, "alcohol": Alcohol, "exercise": Exercise,
            "sleep": Sleep, "meds": Meds, "stress": Stress,
        }
        categories = self.table.categories()
        for category, enum in enums.items():
            assert [v.value for v in enum] == categories[category]

    def test_as_dict_includes_chronic(self):
        table = self.table.as_dict()
        assert table["chronic"] == {"none": 20, "one": 5, "multi": -10}
        assert set(table) == {"smoking", "alcohol", "exercise", "sleep", "meds", "stress", "chronic"}


# ══════════════════════════════════════════════════════════════════════════════
# LIFESPAN ESTIMATOR TESTS
# ══════════════════════════════════════════════════════════════════════════════

class TestRoundHalfUp:

    def setup_method(self):
        from lifespan_engine import round_half_up
        self.fn = round_half_up

    def test_integers_unchanged(self):
        assert self.fn(21.0) == 21
        assert self.fn(-14.0) == -14

    def test_ties_round_up(self):
        assert self.fn(2.5) == 3
        assert self.fn(-2.5) == -2

    def test_nearest(self):
        assert self.fn(0.4) == 0
        assert self.fn(-0.6) == -1


class TestLifespanEstimator:

    def setup_method(self):
        from lifespan_engine import LifespanEstimator
        self.estimator = LifespanEstimator()

    def test_base_life_by_sex(self):
        assert self.estimator.base_life("male") == 76
        assert self.estimator.base_life("female") == 82
        assert self.estimator.base_life("other") == 79
        assert self.estimator.base_life("") == 79

    def test_scenario_a(self):
        result = self.estimator.estimate(healthy_male())
        assert result.score == 105
        assert result.base_life == 76
        assert result.predicted_health_span == 97
        assert result.years_remaining == 21

    def test_scenario_b_floor_clamp(self):
        result = self.estimator.estimate(high_risk_female())
        assert result.score == -70
        assert result.predicted_health_span == 72
        assert result.years_remaining == 0

    def test_scenario_c_zero_score(self):
        result = self.estimator.estimate(zero_score_other())
        assert result.score == 0
        assert result.predicted_health_span == 79
        assert result.years_remaining == 39

    def test_unknown_answer_contributes_zero(self):
        record = replace(healthy_male(), smoking="unknown")
        assert self.estimator.score(record) == 105 - 20

    def test_all_unknown_only_chronic_band_counts(self):
        record = AnswerRecord(
            age=30, sex="?", smoking="?", alcohol="?", exercise="?",
            sleep="?", chronic_count=1, meds="?", stress="?",
        )
        assert self.estimator.score(record) == 5

    def test_predicted_never_below_floor(self):
        for sex in ["male", "female", "other", "unknown"]:
            record = replace(high_risk_female(), sex=sex)
            result = self.estimator.estimate(record)
            assert result.predicted_health_span >= result.base_life - 10

    def test_negative_age_degrades_gracefully(self):
        result = self.estimator.estimate(replace(healthy_male(), age=-5))
        assert result.years_remaining == 97 + 5

    def test_age_beyond_prediction_gives_zero_remaining(self):
        result = self.estimator.estimate(replace(healthy_male(), age=120))
        assert result.years_remaining == 0

    def test_years_remaining_never_negative(self):
        for age in [1, 50, 80, 100, 150]:
            for record in [healthy_male(), high_risk_female(), zero_score_other()]:
                result = self.estimator.estimate(replace(record, age=age))
                assert result.years_remaining >= 0


# ══════════════════════════════════════════════════════════════════════════════
# IMPROVEMENT ADVISOR TESTS
# ══════════════════════════════════════════════════════════════════════════════

class TestImprovementAdvisor:

    def setup_method(self):
        from improvement_engine import ImprovementAdvisor
        self.advisor = ImprovementAdvisor()

    def test_no_suggestions_for_best_answers(self):
        assert self.advisor.suggest(healthy_male()) == []

    def test_scenario_b_order_and_points(self):
        suggestions = self.advisor.suggest(high_risk_female())
        assert [s.category for s in suggestions] == ["exercise", "sleep", "alcohol", "stress"]
        assert [s.points for s in suggestions] == [25, 15, 10, 10]
        assert [s.current for s in suggestions] == [-10, -10, -15, -10]

    def test_exercise_week1_2(self):
        record = replace(healthy_male(), exercise="week1_2")
        [s] = self.advisor.suggest(record)
        assert s.category == "exercise"
        assert s.points == 10
        assert s.current == 5

    def test_exercise_week3_5_no_suggestion(self):
        record = replace(healthy_male(), exercise="week3_5")
        assert self.advisor.suggest(record) == []

    def test_sleep_5_6(self):
        record = replace(healthy_male(), sleep="5_6")
        [s] = self.advisor.suggest(record)
        assert (s.category, s.points, s.current) == ("sleep", 15, 0)

    def test_oversleeping_no_suggestion(self):
        record = replace(healthy_male(), sleep="9plus")
        assert self.advisor.suggest(record) == []

    def test_alcohol_week2_3_reduce(self):
        record = replace(healthy_male(), alcohol="week2_3")
        [s] = self.advisor.suggest(record, "en")
        assert s.text == "Reduce drinking"
        assert s.current == -5

    def test_alcohol_week1_quit(self):
        record = replace(healthy_male(), alcohol="week1")
        [s] = self.advisor.suggest(record, "en")
        assert s.text == "Quit drinking entirely"
        assert s.points == 10
        assert s.current == 5

    def test_stress_mid(self):
        record = replace(healthy_male(), stress="mid")
        [s] = self.advisor.suggest(record, "en")
        assert s.text == "Reduce stress further"
        assert s.current == 0

    def test_korean_copy_by_default(self):
        suggestions = self.advisor.suggest(high_risk_female(), "ko")
        assert suggestions[0].text == "운동 주 3회만 해도"

    def test_unknown_values_no_suggestions(self):
        record = replace(healthy_male(), exercise="x", sleep="x", alcohol="x", stress="x")
        assert self.advisor.suggest(record) == []

    def test_at_most_four(self):
        assert len(self.advisor.suggest(high_risk_female())) == 4


# ══════════════════════════════════════════════════════════════════════════════
# STATUS CLASSIFIER TESTS
# ══════════════════════════════════════════════════════════════════════════════

class TestStatusClassifier:

    def setup_method(self):
        from status_classifier import StatusClassifier
        self.classifier = StatusClassifier()

    def test_balanced_boundary_inclusive(self):
        assert self.classifier.classify(30).type == "balanced"

    def test_just_below_balanced(self):
        assert self.classifier.classify(29).type == "needs-recovery"

    def test_zero_is_needs_recovery(self):
        assert self.classifier.classify(0).type == "needs-recovery"

    def test_negative_is_high_risk(self):
        assert self.classifier.classify(-1).type == "high-risk"
        assert self.classifier.classify(-70).type == "high-risk"

    def test_localized_label(self):
        assert self.classifier.classify(-70, "ko").label == "리스크높음형"
        assert self.classifier.classify(105, "en").label == "Balanced"

    def test_summary_present(self):
        status = self.classifier.classify(10, "en")
        assert "improvement points" in status.summary

    def test_unknown_locale_falls_back(self):
        from config import settings
        status = self.classifier.classify(50, "fr")
        assert status == self.classifier.classify(50, settings.DEFAULT_LOCALE)


# ══════════════════════════════════════════════════════════════════════════════
# RESULT ASSEMBLER TESTS
# ══════════════════════════════════════════════════════════════════════════════

class TestResultAssembler:

    def setup_method(self):
        from result_assembler import ResultAssembler
        self.assembler = ResultAssembler()

    def test_scenario_a_nothing_to_improve(self):
        result = self.assembler.assemble(healthy_male())
        assert result.status.type == "balanced"
        assert result.improvements == ()
        assert result.improvement_total == 0
        assert result.additional_years is None
        assert result.risk_points == 0

    def test_scenario_b(self):
        result = self.assembler.assemble(high_risk_female())
        assert result.status.type == "high-risk"
        assert result.improvement_total == 60
        assert result.additional_years == (12, 14)
        assert result.risk_points == 70

    def test_scenario_c(self):
        result = self.assembler.assemble(zero_score_other())
        assert result.status.type == "needs-recovery"
        assert result.improvement_total == 45
        assert result.additional_years == (9, 11)
        assert result.risk_points == 0

    def test_idempotent(self):
        record = high_risk_female()
        assert self.assembler.assemble(record) == self.assembler.assemble(record)

    def test_module_entry_point(self):
        from result_assembler import assemble
        assert assemble(healthy_male()) == self.assembler.assemble(healthy_male())

    def test_record_not_mutated(self):
        record = zero_score_other()
        before = asdict(record)
        self.assembler.assemble(record)
        assert asdict(record) == before

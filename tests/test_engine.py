from stepper.execution.engine import StepRunner
from stepper.execution.schemas.state_machine import RunnerPhase
from stepper.state.models import RunState

from conftest import FIXED_NOW


def test_new_runner_is_idle():
    runner = StepRunner()

    assert runner.get_state() == RunState()
    assert runner.phase(None) is RunnerPhase.IDLE
    assert runner.continue_step(None).completed is True


def test_zero_step_article_is_complete_immediately(empty_article, mail_article):
    runner = StepRunner()

    result = runner.start_article("empty", empty_article)

    assert result.total_steps == 0
    assert result.current_step is None
    assert runner.is_complete(empty_article)
    assert runner.phase(empty_article) is RunnerPhase.COMPLETE

    runner.start_article("mail", mail_article)
    assert not runner.is_complete(mail_article)
    assert runner.phase(mail_article) is RunnerPhase.ACTIVE


def test_walk_main_path_to_completion(mail_article):
    runner = StepRunner()
    runner.start_article("mail", mail_article)

    results = [runner.continue_step(mail_article) for _ in range(3)]

    assert [r.completed for r in results] == [False, False, True]
    assert runner.get_state().completed_step_ids == ["s1", "s2", "s3"]
    assert runner.is_complete(mail_article)
    assert runner.get_current_step(mail_article) is None


def test_back_never_uncompletes(mail_article):
    runner = StepRunner()
    runner.start_article("mail", mail_article)
    runner.continue_step(mail_article)
    runner.continue_step(mail_article)

    runner.back()
    runner.back()

    assert runner.get_state().completed_step_ids == ["s1", "s2"]
    assert runner.get_current_step(mail_article).id == "s1"
    assert runner.back().success is False


def test_failure_then_fallback_flow(mail_article):
    runner = StepRunner()
    runner.start_article("mail", mail_article)
    runner.continue_step(mail_article)
    runner.continue_step(mail_article)

    runner.record_failure("s3", "no-change", "still stuck", now=FIXED_NOW)
    selection = runner.select_fallback(mail_article, [mail_article], "no-change", "still stuck")
    completed_texts = [s.text for s in mail_article.steps if s.id in runner.get_state().completed_step_ids]
    result = runner.switch_to_fallback(selection.fallback.id, selection.article, completed_texts)

    assert result.skipped_steps == 2
    assert runner.get_skipped_steps_count() == 2
    assert runner.get_current_step(mail_article).id == "c3"
    assert runner.get_total_steps(mail_article) == 3

    runner.clear_skipped_steps_count()
    assert runner.get_skipped_steps_count() == 0

    assert runner.continue_step(mail_article).completed is True
    assert runner.get_state().completed_step_ids == ["s1", "s2", "c3"]


def test_custom_similarity_threshold(mail_article):
    runner = StepRunner(similarity_threshold=0.99)
    runner.start_article("mail", mail_article)

    result = runner.switch_to_fallback("fb-smtp", mail_article, ["Reset the SMTP server now"])

    # 4 of 5 tokens shared is similar at 0.6 but not at 0.99
    assert result.skipped_steps == 0


def test_reset_round_trip(mail_article):
    runner = StepRunner()
    runner.start_article("mail", mail_article)
    runner.continue_step(mail_article)
    runner.record_failure("s2", "system-error")
    runner.switch_to_fallback("fb-quota", mail_article)

    runner.reset()
    runner.reset()

    assert runner.get_state() == RunState()


def test_completion_summary(mail_article):
    runner = StepRunner()
    runner.start_article("mail", mail_article, now=FIXED_NOW)
    for _ in range(3):
        runner.continue_step(mail_article)

    summary = runner.get_completion_summary(now=FIXED_NOW)

    assert summary.completed_steps == ["s1", "s2", "s3"]
    assert summary.failure_history == []
    assert summary.attempted_paths[0].started_at == FIXED_NOW
    assert summary.completed_at == FIXED_NOW

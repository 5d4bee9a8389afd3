import pytest
from dataclasses import replace

from countries import default_buckets
from wizard import (initial_state, reduce, result, plan, progress, WizardState,
                    Answer, SetField, Continue, Back, SetBuckets, SetAssumptions, SetEmail,
                    SetNotes, Submit, SubmitSucceeded, SubmitFailed, Reset,
                    LIFESTYLE, COUNTRY, HOUSING, INCOME, SAFETY, CONTACT, LAST_STEP)


def run(state, *actions):
    for action in actions:
        state = reduce(state, action)
    return state


def test_initial_state():
    s = initial_state()
    assert s.step == LIFESTYLE
    assert s.answers.lifestyle is None
    assert not s.submitting and not s.submitted
    assert progress(s) == 0.0


def test_prefill_ignores_unknown_and_empty_keys():
    s = initial_state({"lifestyle": "Luxury", "travel": "", "favourite_colour": "blue"}, token="t1")
    assert s.answers.lifestyle == "Luxury"
    assert s.answers.travel is None
    assert s.token == "t1"


def test_lifestyle_advances_and_sets_housing():
    s = reduce(initial_state(), Answer("lifestyle", "Comfortable"))
    assert s.step == COUNTRY
    assert s.answers.housing == "rent_modest"


def test_country_does_not_advance():
    s = run(initial_state(), Answer("lifestyle", "Simple"), Answer("country", "US"))
    assert s.step == COUNTRY
    assert s.answers.country == "US"
    s = reduce(s, Continue())
    assert s.step == HOUSING


def test_back_and_bounds():
    s = initial_state()
    assert reduce(s, Back()).step == 0
    s = replace(s, step=LAST_STEP)
    assert reduce(s, Continue()).step == LAST_STEP
    assert progress(s) == 1.0


def test_unknown_question_and_field_are_ignored():
    s = initial_state()
    assert reduce(s, Answer("pets", "cat")) is s
    assert reduce(s, SetField("salary", "10")) is s


def test_unknown_assumptions_are_ignored():
    s = reduce(initial_state(), SetAssumptions({"retire_age": 55, "current_age": 45}))
    assert s.assumptions.current_age == 45
    assert not hasattr(s.assumptions, "retire_age")


def test_saved_dict_buckets_are_rebuilt():
    saved = {k: b.to_dict() for k, b in default_buckets("UAE").items()}
    s = initial_state({"lifestyle": "Simple", "country": "UAE"}, buckets=saved)
    assert s.buckets["housing"].value == 5000
    assert s.initial_buckets["housing"].max == 15000
    assert result(s).annual_spend == 174000


def test_unknown_action_raises():
    with pytest.raises(TypeError):
        reduce(initial_state(), object())


def test_income_step_requires_net_worth():
    s = replace(initial_state(), step=INCOME)
    blocked = reduce(s, Continue())
    assert blocked.step == INCOME
    assert "liquid_net_worth" in blocked.errors

    s = run(blocked, SetField("liquid_net_worth", "5L"))
    assert s.answers.liquid_net_worth == "500000"
    assert "liquid_net_worth" not in s.errors
    assert reduce(s, Continue()).step == SAFETY


def test_empty_field_clears_value():
    s = run(initial_state(), SetField("pension", "10k"), SetField("pension", ""))
    assert s.answers.pension is None


def test_safety_seeds_assumptions():
    s = replace(initial_state(), step=SAFETY)
    s = reduce(s, Answer("safety", "aggressive"))
    assert s.step == CONTACT
    assert s.answers.safety == "aggressive"
    assert s.assumptions.pre_retirement_return == 0.10
    assert s.assumptions.post_retirement_return == 0.06
    assert s.assumptions.equity_alloc == 0.80


def test_set_assumptions_and_notes():
    s = run(initial_state(), SetAssumptions({"current_age": 40, "mode": "advanced"}), SetNotes("hi"))
    assert s.assumptions.current_age == 40
    assert s.assumptions.mode == "advanced"
    assert s.notes == "hi"


def test_submit_flow():
    s = replace(initial_state(), step=CONTACT)
    s = run(s, SetField("liquid_net_worth", "1000000"), Submit())
    assert s.errors == {"email": "Please enter a valid email address"}
    assert not s.submitting

    s = run(s, SetEmail("me@example.com"))
    assert "email" not in s.errors
    s = reduce(s, Submit())
    assert s.submitting
    assert reduce(s, Submit()) is s

    failed = reduce(s, SubmitFailed())
    assert not failed.submitting
    assert failed.errors["submit"] == "Failed to submit. Please try again."

    done = reduce(s, SubmitSucceeded("tok-1"))
    assert done.submitted and not done.submitting
    assert done.token == "tok-1"


def test_returning_user_needs_no_email():
    s = initial_state(token="abc")
    s = run(s, SetField("liquid_net_worth", "2Cr"), Submit())
    assert s.errors == {}
    assert s.submitting


def test_reset_keeps_identity_and_initial_buckets():
    start = default_buckets("India")
    s = initial_state(buckets=start, token="abc", name="Asha")
    edited = {k: replace(b, value=1) for k, b in start.items()}
    s = run(s, Answer("lifestyle", "Luxury"), SetBuckets(edited), Reset())
    assert s.step == 0
    assert s.answers.lifestyle is None
    assert s.token == "abc" and s.name == "Asha"
    assert s.buckets["housing"].value == 15000


def test_result_selector_uses_buckets():
    s = run(initial_state(), Answer("lifestyle", "Simple"), Answer("country", "UAE"))
    tiers = result(s)
    s = reduce(s, SetBuckets(default_buckets("UAE")))
    custom = result(s)
    assert custom.annual_spend == 174000
    assert custom.balanced == 4350000
    assert custom.currency == "AED"
    assert tiers.annual_spend != custom.annual_spend


def test_plan_selector():
    s = run(initial_state(), SetBuckets(default_buckets("India")),
            SetField("liquid_net_worth", "100000"), SetField("annual_income_job", "12L"))
    p = plan(s)
    assert p.target_amount == result(s).required
    assert p.has_details and p.has_income_data
    assert p.total_annual_income == 1200000

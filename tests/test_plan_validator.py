from console.services.plans.plan_draft import new_draft
from console.services.plans.plan_validator import validate_plan_draft


def draft_with(name="pro", display_name="Pro", amount=50, currency="GHS"):
    return new_draft().with_changes(
        name=name,
        display_name=display_name,
        pricing={currency: {"amount": amount, "currency": currency}},
    )


def test_valid_draft_has_no_errors():
    assert validate_plan_draft(draft_with()) == {}


def test_blank_name():
    assert validate_plan_draft(draft_with(name="", amount=10)) == {"name": "Plan ID is required"}


def test_whitespace_name_counts_as_blank():
    assert validate_plan_draft(draft_with(name="   ")) == {"name": "Plan ID is required"}


def test_blank_display_name():
    assert validate_plan_draft(draft_with(display_name="")) == {
        "displayName": "Display name is required",
    }


def test_zero_base_price():
    assert validate_plan_draft(draft_with(amount=0)) == {
        "pricingGHS": "GHS pricing must be greater than 0",
    }


def test_negative_or_non_numeric_base_price():
    assert "pricingGHS" in validate_plan_draft(draft_with(amount=-5))
    assert "pricingGHS" in validate_plan_draft(draft_with(amount="50"))
    assert "pricingGHS" in validate_plan_draft(draft_with(amount=None))
    assert "pricingGHS" in validate_plan_draft(draft_with(amount=True))


def test_missing_base_currency_entry():
    draft = draft_with(currency="USD")
    assert validate_plan_draft(draft) == {"pricingGHS": "GHS pricing must be greater than 0"}


def test_configurable_base_currency():
    draft = draft_with(currency="USD", amount=9.99)
    assert validate_plan_draft(draft, base_currency="USD") == {}


def test_rules_are_independent():
    errors = validate_plan_draft(new_draft())
    assert set(errors) == {"name", "displayName", "pricingGHS"}


def test_features_and_limits_are_not_inspected():
    draft = draft_with().with_changes(features={"anything": "garbage"}, limits={"x": object()})
    assert validate_plan_draft(draft) == {}

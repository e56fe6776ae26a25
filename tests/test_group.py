"""
Tests for ValidatorGroup.
"""

import pytest

from vouch import Success, V, ValidatorGroup, compose, create, kleisli
from vouch.validators import string


@pytest.fixture
def email_validator():
    pattern = string.pattern(r"[^@]+@[^\.]+\..+", message=lambda f: f"Please provide a valid {f}")
    not_blacklisted = create(
        lambda f: f"{f} must not equal fake@test.com",
        lambda x: x not in ("fake", "fake@test", "fake@test.com"),
    )
    return ValidatorGroup(string.between_len(8, 512)).and_(pattern).then(not_blacklisted).build()


class TestEmailScenario:
    def test_and_steps_accumulate(self, email_validator):
        result = email_validator("Login", "fake")
        assert result.errors.to_map() == {
            "Login": [
                "'Login' must be between 8 and 512 characters",
                "Please provide a valid Login",
            ]
        }

    def test_pattern_only(self, email_validator):
        result = email_validator("Login", "fake@test")
        assert result.errors.to_map() == {"Login": ["Please provide a valid Login"]}

    def test_then_step_reports_only_itself(self, email_validator):
        result = email_validator("Login", "fake@test.com")
        assert result.errors.to_map() == {"Login": ["Login must not equal fake@test.com"]}

    def test_valid(self, email_validator):
        assert email_validator("Login", "someone@example.com") == Success("someone@example.com")


class TestGroup:
    def test_build_returns_v(self):
        assert isinstance(ValidatorGroup(string.not_empty()).build(), V)

    def test_start_only(self):
        built = ValidatorGroup(string.not_empty()).build()
        assert built("Name", "x") == Success("x")
        assert built("Name", " ").errors.to_map() == {"Name": ["'Name' must not be empty"]}

    def test_accepts_plain_functions(self):
        built = ValidatorGroup(lambda field, value: Success(value.strip())).build()
        assert built("Name", " x ") == Success("x")

    def test_and_with_none_input(self):
        not_foo = create(lambda f: f"'{f}' must not be foo", lambda x: x != "foo")
        built = ValidatorGroup(string.not_empty()).and_(not_foo).build()
        assert built("Test", None).errors.to_map() == {"Test": ["'Test' must not be empty"]}

    def test_groups_are_persistent(self, failing):
        first = ValidatorGroup(string.not_empty())
        second = first.and_(failing("extra"))
        assert first.build()("Name", "x") == Success("x")
        assert second.build()("Name", "x").errors.to_map() == {"Name": ["extra"]}

    def test_then_skipped_after_failure(self, exploding):
        built = ValidatorGroup(string.not_empty()).then(exploding).build()
        assert built("Name", "").errors.to_map() == {"Name": ["'Name' must not be empty"]}

    def test_mixed_chain_matches_combinators(self, failing):
        v1, v2, v3 = string.not_empty(), string.less_than_len(5), failing("v3")
        grouped = ValidatorGroup(v1).and_(v2).then(v3).build()
        direct = kleisli(compose(v1, v2), v3)
        for sample in ["", "abc", "toolong", "   longer   "]:
            assert grouped("f", sample) == direct("f", sample)

    def test_and_after_then_sees_original_input(self, passing, failing):
        parse = V(lambda field, value: Success(int(value)))
        checks = passing()
        grouped = ValidatorGroup(string.not_empty()).then(parse).and_(checks).build()
        direct = compose(kleisli(string.not_empty(), parse), passing())
        assert grouped("n", "42") == direct("n", "42") == Success(42)
        assert checks.calls == [("n", "42")]

        grouped = ValidatorGroup(string.not_empty()).then(failing("A")).and_(failing("B")).build()
        assert grouped("n", "x").errors.to_map() == {"n": ["A", "B"]}

    def test_long_group_does_not_recurse(self, failing):
        group = ValidatorGroup(string.not_empty())
        for i in range(5000):
            group = group.and_(string.less_than_len(10)) if i % 2 else group.then(string.not_empty())
        built = group.and_(failing("last")).build()
        assert built("f", "ok").errors.to_map() == {"f": ["last"]}

    def test_rejects_non_callable_steps(self):
        group = ValidatorGroup(string.not_empty())
        with pytest.raises(TypeError):
            group.and_(3)
        with pytest.raises(TypeError):
            group.then("not a validator")

    def test_repr(self):
        assert repr(ValidatorGroup(string.not_empty())).startswith("ValidatorGroup(V(")

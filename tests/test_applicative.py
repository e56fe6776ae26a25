"""
Tests for validating many fields at once: zip_all, gather, validate and @validation.
"""

from dataclasses import dataclass

import pytest

from vouch import Failure, FieldErrors, Success, ValidatorGroup, gather, optional, validate, validation, zip_all
from vouch.validators import string, value


@dataclass
class Person:
    first_name: str
    age: int


first_name_v = string.between_len(3, 64)
age_v = value.greater_than(0)

E_NAME = FieldErrors.create("firstName", ["bad name"])
E_AGE = FieldErrors.create("age", ["bad age"])


class TestZipAll:
    def test_all_success(self):
        assert zip_all(Success(1), Success("a"), Success(None)) == Success((1, "a", None))

    def test_no_outcomes(self):
        assert zip_all() == Success(())

    def test_every_failure_merged_in_order(self):
        result = zip_all(
            Failure(FieldErrors.create("f", ["first"])),
            Success(1),
            Failure(FieldErrors.create("f", ["second"])),
        )
        assert result.errors.to_map() == {"f": ["first", "second"]}

    def test_rejects_non_outcomes(self):
        with pytest.raises(TypeError):
            zip_all(Success(1), 2)


class TestGather:
    def test_named(self):
        assert gather(a=Success(1), b=Success(2)) == Success({"a": 1, "b": 2})

    def test_mapping_argument(self):
        assert gather({"first-name": Success("Al")}) == Success({"first-name": "Al"})

    def test_failures(self):
        result = gather(name=Failure(E_NAME), age=Failure(E_AGE), ok=Success(1))
        assert result == Failure(E_NAME + E_AGE)


class TestValidate:
    def test_all_fields_invalid_reports_every_field(self):
        result = validate(
            Person,
            first_name=first_name_v("firstName", "Jo"),
            age=age_v("age", -1),
        )
        assert isinstance(result, Failure)
        assert set(result.errors.fields) == {"firstName", "age"}
        assert result.errors.messages_for("age") == ["'age' must be greater than 0"]

    def test_constructs_on_success(self):
        result = validate(
            Person,
            first_name=first_name_v("firstName", "John"),
            age=age_v("age", 30),
        )
        assert result == Success(Person(first_name="John", age=30))

    def test_positional_and_named(self):
        result = validate(Person, Success("John"), age=Success(3))
        assert result == Success(Person("John", 3))

    def test_field_named_construct(self):
        result = validate(lambda **kwargs: kwargs, construct=Success(1), name=Success("x"))
        assert result == Success({"construct": 1, "name": "x"})

    def test_field_named_construct_failing(self):
        errors = FieldErrors.create("construct", ["bad"])
        assert validate(lambda **kwargs: kwargs, construct=Failure(errors)) == Failure(errors)

    def test_construct_not_called_on_failure(self):
        def construct(**kwargs):
            raise AssertionError("should not be called")

        result = validate(construct, a=Failure(E_NAME), b=Success(1))
        assert result == Failure(E_NAME)

    def test_declared_order_for_same_field(self):
        result = validate(
            lambda *args: args,
            Failure(FieldErrors.create("f", ["one"])),
            Failure(FieldErrors.create("f", ["two"])),
        )
        assert result.errors.messages_for("f") == ["one", "two"]

    def test_with_group_and_optional(self):
        name = ValidatorGroup(string.greater_than_len(2)).and_(string.less_than_len(100)).build()
        age = optional(ValidatorGroup(value.greater_than(0)).and_(value.less_than(100)).build())
        result = validate(Person, first_name=name("Name", "John"), age=age("Age", None))
        assert result == Success(Person("John", None))


class TestValidationBlock:
    def test_parallel_bind_accumulates(self):
        @validation
        def person(data):
            first_name, age = yield (
                first_name_v("firstName", data["firstName"]),
                age_v("age", data["age"]),
            )
            return Person(first_name, age)

        assert person({"firstName": "John", "age": 3}) == Success(Person("John", 3))
        result = person({"firstName": "Jo", "age": -1})
        assert set(result.errors.fields) == {"firstName", "age"}

    def test_sequential_bind_short_circuits(self):
        reached = []

        @validation
        def block():
            name = yield Failure(E_NAME)
            reached.append(name)
            age = yield Failure(E_AGE)
            return name, age

        assert block() == Failure(E_NAME)
        assert reached == []

    def test_sequential_then_parallel(self):
        @validation
        def block(raw):
            stripped = yield string.not_empty()("name", raw)
            values = yield {"name": first_name_v("name", stripped.strip()), "age": Success(1)}
            return values

        assert block(" John ") == Success({"name": "John", "age": 1})
        assert block("").errors.fields == ("name",)

    def test_return_outcome_passes_through(self):
        @validation
        def block():
            x = yield Success(1)
            return Success(x + 1)

        assert block() == Success(2)

    def test_no_yields(self):
        @validation
        def block():
            return 5
            yield  # pragma: no cover

        assert block() == Success(5)

    def test_generator_closed_on_failure(self):
        closed = []

        @validation
        def block():
            try:
                yield Failure(E_NAME)
                yield Success(1)
            finally:
                closed.append(True)

        block()
        assert closed == [True]

    def test_bad_yield(self):
        @validation
        def block():
            yield 42

        with pytest.raises(TypeError):
            block()

    def test_requires_generator(self):
        with pytest.raises(TypeError):

            @validation
            def not_a_generator():
                return 1

    def test_keeps_name(self):
        @validation
        def person_block():
            yield Success(1)

        assert person_block.__name__ == "person_block"

"""Tests for predispatch.errors — exception hierarchy and error messages."""

import copy
import pickle

import pytest

from predispatch import create
from predispatch.errors import NoMatchingHandler, PredispatchError, RegistrationError


class TestHierarchy:
    def test_registration_error_is_predispatch_error(self) -> None:
        assert issubclass(RegistrationError, PredispatchError)

    def test_registration_error_is_type_error(self) -> None:
        assert issubclass(RegistrationError, TypeError)

    def test_no_matching_handler_is_predispatch_error(self) -> None:
        assert issubclass(NoMatchingHandler, PredispatchError)

    def test_no_matching_handler_is_not_type_error(self) -> None:
        assert not issubclass(NoMatchingHandler, TypeError)


class TestNoMatchingHandler:
    def test_attributes(self) -> None:
        generic = create(name="area", length=1)
        err = NoMatchingHandler(generic, ("square",))

        assert err.generic is generic
        assert err.args == ("square",)

    def test_message(self) -> None:
        generic = create(name="area", length=1)
        err = NoMatchingHandler(generic, ("square", 2))

        assert str(err) == 'Generic function "area" cannot be applied to arguments (\'square\', 2)'

    def test_message_without_name(self) -> None:
        err = NoMatchingHandler(create(), ())
        assert str(err) == 'Generic function "" cannot be applied to arguments ()'

    def test_copy_keeps_single_argument(self) -> None:
        generic = create(name="area", length=1)
        err = copy.copy(NoMatchingHandler(generic, ("x",)))

        assert err.generic is generic
        assert err.args == ("x",)

    def test_pickle_round_trip(self) -> None:
        err = pickle.loads(pickle.dumps(NoMatchingHandler(None, (5, 6))))

        assert isinstance(err, NoMatchingHandler)
        assert err.generic is None
        assert err.args == (5, 6)
        assert str(err) == 'Generic function "" cannot be applied to arguments (5, 6)'

    def test_raised_and_caught_as_base(self) -> None:
        generic = create(name="area", length=1)

        with pytest.raises(PredispatchError):
            generic(1)


class TestRegistrationError:
    def test_message(self) -> None:
        with pytest.raises(RegistrationError) as exc_info:
            create(default=5)  # type: ignore[arg-type]

        assert str(exc_info.value) == "Expecting the default handler to be a function, got 5 instead"

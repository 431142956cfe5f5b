"""Tests for switchyard.routing.layer — arity and handler kinds."""

import dataclasses
import functools

import pytest

from switchyard.routing.layer import HandlerKind, Layer, handler_arity, handler_kind


def three(request, response, proceed):
    pass


def four(error, request, response, proceed):
    pass


class Handlers:
    def normal(self, request, response, proceed):
        pass

    def error(self, error, request, response, proceed):
        pass

    def __call__(self, error, request, response, proceed):
        pass


class TestHandlerArity:
    def test_plain_functions(self) -> None:
        assert handler_arity(three) == 3
        assert handler_arity(four) == 4
        assert handler_arity(lambda: None) == 0

    def test_defaults_not_counted(self) -> None:
        def handler(request, response, proceed=None, extra=None):
            pass

        assert handler_arity(handler) == 2

    def test_varargs_and_keyword_only_not_counted(self) -> None:
        def handler(request, response, *args, proceed, **kwargs):
            pass

        assert handler_arity(handler) == 2

    def test_bound_methods(self) -> None:
        handlers = Handlers()
        assert handler_arity(handlers.normal) == 3
        assert handler_arity(handlers.error) == 4

    def test_callable_object(self) -> None:
        assert handler_arity(Handlers()) == 4

    def test_partial(self) -> None:
        partial = functools.partial(four, ValueError("bound"))
        assert handler_arity(partial) == 3

    def test_uninspectable_counts_zero(self) -> None:
        assert handler_arity(object()) == 0


class TestHandlerKind:
    def test_four_is_error(self) -> None:
        assert handler_kind(four) is HandlerKind.ERROR
        assert handler_kind(Handlers().error) is HandlerKind.ERROR

    def test_fewer_is_normal(self) -> None:
        assert handler_kind(three) is HandlerKind.NORMAL
        assert handler_kind(lambda request: None) is HandlerKind.NORMAL

    def test_more_is_normal(self) -> None:
        def five(a, b, c, d, e):
            pass

        assert handler_kind(five) is HandlerKind.NORMAL

    def test_async_handlers_classified_the_same(self) -> None:
        async def async_error(error, request, response, proceed):
            pass

        assert handler_kind(async_error) is HandlerKind.ERROR


class TestLayer:
    def test_frozen(self) -> None:
        layer = Layer(method="GET", anchor="/a", handler=three)
        with pytest.raises(dataclasses.FrozenInstanceError):
            layer.method = "POST"  # type: ignore[misc]

    def test_describe(self) -> None:
        assert Layer("GET", "/a", three).describe() == "GET /a -> three"
        error_layer = Layer("*", "", four, HandlerKind.ERROR)
        assert error_layer.describe() == "* / -> four [error]"
        assert error_layer.is_error_handler

    def test_describe_nested_handler_uses_plain_name(self) -> None:
        def lookup(request, response, proceed):
            pass

        assert Layer("GET", "/api", lookup).describe() == "GET /api -> lookup"

    def test_describe_nameless_callable_uses_repr(self) -> None:
        handler = functools.partial(three, None)
        assert Layer("*", "/a", handler).describe() == f"* /a -> {handler!r}"

"""Tests for bearer token extraction."""

import logging

import pytest

from orderhub.infrastructure.logging import LOG_FORMAT, get_logger
from orderhub.infrastructure.request_context import RequestContext


@pytest.mark.parametrize(
    "headers, expected",
    [
        ({"Authorization": "Bearer abc.def"}, "abc.def"),
        ({"authorization": "bearer   xyz  "}, "xyz"),
        ({"Authorization": "Basic dXNlcg=="}, None),
        ({"Authorization": "Bearer "}, None),
        ({}, None),
    ],
)
def test_get_bearer_token(headers, expected):
    assert RequestContext(headers).get_bearer_token() == expected


def test_context_carries_headers_only():
    context = RequestContext({"Authorization": "Bearer t"})

    assert context.get_bearer_token() == "t"
    assert not hasattr(context, "customer_id")
    assert not hasattr(context, "is_admin")


def test_get_logger_attaches_single_handler():
    logger = get_logger("orderhub.tests.request_context")
    same = get_logger("orderhub.tests.request_context")

    assert logger is same
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_get_logger_level_applies_on_first_use_only():
    logger = get_logger("orderhub.tests.debug_logger", level="DEBUG")
    again = get_logger("orderhub.tests.debug_logger", level=logging.ERROR)

    assert again is logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

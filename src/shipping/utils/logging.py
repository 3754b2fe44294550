"""Logging configuration for the Shipping domain."""

import logging

import structlog

# Suppress noisy library loggers
logging.getLogger("protean").setLevel(logging.WARNING)


def get_logger(name: str):
    return structlog.get_logger(name)

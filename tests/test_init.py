# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for the package's public surface."""

import payloadguard


def test_version():
    assert payloadguard.__version__ == "0.1.0"


def test_all_exports_resolve():
    for name in payloadguard.__all__:
        assert hasattr(payloadguard, name), name


def test_logger_namespace():
    assert payloadguard.logger.name == "payloadguard"

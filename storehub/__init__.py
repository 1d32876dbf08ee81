# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Telegram Store Hub admin backend."""

__version__ = "0.1.0"

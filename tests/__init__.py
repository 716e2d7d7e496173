# SPDX-License-Identifier: Apache-2.0
"""
Weaviate SDK tests.

Every test runs against an in-process server stand-in (see conftest.py);
no live Weaviate instance is needed.
"""

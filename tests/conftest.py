"""Shared test setup: makes the fakes in this directory importable."""

import os
import sys

# Ensure tests/ is on sys.path so test files can import
# fake_command_runner unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

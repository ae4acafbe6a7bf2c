"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_TEXT = """\
## Plan

See [docs](https://example.com).

- First step
3. **Review**

| Skill | Level |
|-------|-------|
| Python | *High* |

| SQL | Medium |
Closing remarks.
> Keep going
"""


@pytest.fixture(name="sample_text")
def sample_text_fixture():
    return SAMPLE_TEXT

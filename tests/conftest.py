"""Shared fixtures: a parser instance and sample COL documents"""

from datetime import datetime, timezone

import pytest

from colpub.core.pipeline import ColParser


SAMPLE_COL = """\
---
title: Hello
tags: a, b
---
# Hi
**bold** and *em*
"""

FULL_COL = """\
---
title: "A Full Post"
author: 'Ada'
date: 2024-03-01
slug: full-post
---
<preview>A **short** teaser with [a link](https://example.com).</preview>

# Getting Started

Some intro text with `inline *code*` and a [relative link](/about).

```python
# top comment
def f(x):
    # not a heading
    return x * 2 * 3
```

- first
- second

1. one
2. two

> quoted line

---

Closing paragraph.
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return ColParser()


@pytest.fixture(name="today")
def today_fixture():
    return datetime.now(timezone.utc).date().isoformat()


@pytest.fixture(name="col_file")
def col_file_fixture(tmp_path):
    path = tmp_path / "full.col"
    path.write_text(FULL_COL, encoding="utf-8")
    return path


@pytest.fixture(name="sample_col")
def sample_col_fixture():
    return SAMPLE_COL


@pytest.fixture(name="full_col")
def full_col_fixture():
    return FULL_COL

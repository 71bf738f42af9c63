"""Shared fixtures: a small markdown document with one table, before and after an edit"""

import pytest


OLD_MD = """\
# Inventory

| Name | Price |
| --- | --: |
| apple | 1.00 |
| pear | 2.00 |
"""

NEW_MD = """\
# Inventory

| Name | Qty | Price |
| --- | --- | --: |
| apple | 3 | 1.00 |
| pear | 5 | 2.00 |
| plum | 7 | 3.00 |
"""


@pytest.fixture(name="old_md")
def old_md_fixture():
    return OLD_MD


@pytest.fixture(name="new_md")
def new_md_fixture():
    return NEW_MD


@pytest.fixture(name="md_files")
def md_files_fixture(tmp_path):
    """Write OLD_MD and NEW_MD to tmp_path; return (old_path, new_path)."""
    old = tmp_path / "old.md"
    new = tmp_path / "table.md"
    old.write_text(OLD_MD, encoding="utf-8")
    new.write_text(NEW_MD, encoding="utf-8")
    return old, new

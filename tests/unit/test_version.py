from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re

from pysatl_random import __version__

PEP440 = re.compile(
    r"^(\d+!)?\d+(\.\d+)*"
    r"([abc]|rc)?\d*"
    r"(\.post\d+)?(\.dev\d+)?$"
)


def test_version_pep440() -> None:
    assert PEP440.match(__version__)

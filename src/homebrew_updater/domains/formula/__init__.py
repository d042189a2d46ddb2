"""Formula Domain

Key Components:
- Formula: Immutable description of a formula release and its derived values
- FormulaRewriter: Regex rewrite of the url and checksum lines of a formula file
"""

from .formula import Formula, ForkRepository, GitSettings, SourceRepository, UpstreamRepository
from .formula_rewriter import FormulaRewriter, rewrite_formula

__all__ = [
    "Formula",
    "ForkRepository",
    "GitSettings",
    "SourceRepository",
    "UpstreamRepository",
    "FormulaRewriter",
    "rewrite_formula",
]

"""
Run Package

Configuration and the per-run context shared by all genomes of an evolutionary run.
"""

from setgenome.run.config  import Config
from setgenome.run.context import GenomeContext

__all__ = ['Config', 'GenomeContext']

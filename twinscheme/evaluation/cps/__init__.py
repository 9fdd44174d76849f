from twinscheme.evaluation.cps.machine import CpsMachine

__all__ = ["CpsMachine"]

"""
raf-stub: a deterministic requestAnimationFrame stand-in for tests

Core modules:
- engine: the frame queue (schedule/cancel/advance/flush/reset)
- precise: decimal-safe addition used to move the simulated clock
- install: replace_raf(), patches schedule/cancel entry points onto roots
- trace: helpers for producing per-frame traces (no behavior changes)
"""

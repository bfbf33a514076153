"""Services Layer — imperative shell around the pure registration rules.

Invariants:
    - Services take their IO collaborators as arguments (no module-level clients)

Design Decisions:
    - Impureim sandwich: pure validation, one IO call, pure outcome mapping
      (ADR: ExMA Functional Core)
"""

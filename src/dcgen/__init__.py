"""
Data Contract Generator (dcgen) Package

Builds a data contract draft (metadata + ordered, typed fields)
through explicit commands, and renders it into contract text.

ARCHITECTURAL GUARANTEE:
------------------------
The core (model, store, backends) contains ZERO knowledge of:
    - Forms, widgets or expand/collapse state
    - Clipboards or displays
    - Where the generated text ends up

The FieldStore owns all draft state and enforces its invariants.
The generator is a pure function of a snapshot of that state.
"""

__version__ = "0.1.0"

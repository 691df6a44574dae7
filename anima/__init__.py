"""
Anima — affective-cognitive control core for simulated agents.

This package holds the part of an agent that feels and chooses. It keeps a
continuously evolving emotional state and uses that state, together with a
depletable willpower budget, to arbitrate between fast intuition and slow
deliberation.

Architecture layers (bottom to top):
    1. Affect state (VAD vectors, triggers, regulation flags)
    2. Appraisal (event interpretation -> emotional momentum)
    3. Dynamics (momentum, attractor pull, regulation, decay)
    4. Classifier (nearest named emotion)
    5. Aspects (Hun/Po personality weighting)
    6. Will (willpower, System 1 / System 2, autonomy, arbitration)
    7. Core (per-agent facade)
"""

__version__ = "0.1.0"
__author__ = "Anima Contributors"

"""Shipping bounded context: Cargo Tracking.

Answers "where is my cargo?" by turning a cargo's delivery state and its
handling history into a display-ready tracking view. Cargo booking, routing
and handling registration are owned elsewhere; this context only reads them.
"""

from protean.domain import Domain

shipping = Domain(name="shipping")

"""Outbound AI calling for property inquiries.

The service places an outbound voice call through a hosted voice-agent
provider and turns the provider's webhook callbacks into appointment rows.
"""

"""Platform features for crowdsrc.

Each feature follows the same layout: ``core`` (domain), ``application``
(services), ``infrastructure`` (adapters) and ``api`` (HTTP transport).
"""

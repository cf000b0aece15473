#!/usr/bin/env python3
"""
Mixboard

Reduces StagelinQ device-state notifications into a structured snapshot
of device, mixer and deck state.
"""

__version__ = "1.0.0"

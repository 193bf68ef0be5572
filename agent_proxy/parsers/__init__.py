# Copyright 2025 Loopper-AI
# Parser modules for inbound Lambda events

from .event_parser import EventParser

__all__ = ["EventParser"]

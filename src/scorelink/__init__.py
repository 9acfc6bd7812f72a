"""
scorelink - Scoreboard Live Link

Bridges an All Sport style basketball scoreboard controller to a live
stats dashboard. Reads EOT-terminated text lines from the controller's
serial output and pushes each field as a Socket.IO update.
"""

__version__ = "1.0.0"
__author__ = "scorelink Contributors"

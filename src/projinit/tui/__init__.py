"""
projinit TUI (Terminal User Interface).

Hosts the wizard engine inside a Textual application.
"""

from projinit.tui.app import WizardApp, run_wizard

__all__ = ["WizardApp", "run_wizard"]

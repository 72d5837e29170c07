"""
DemoReel Pipeline - Driving the analyser from recorded message logs.
"""

from demoreel.pipeline.replay import analyse_lines, analyse_message_log

__all__: list[str] = ["analyse_lines", "analyse_message_log"]

"""Utilities shared across the ADC fuzzing harnesses"""

import logging


def prepare_adc_fuzzing() -> None:
    """Used to disable logging of the adc module"""
    logging.getLogger("adc").setLevel(logging.CRITICAL)

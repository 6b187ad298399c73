# -*- coding: utf-8 -*-

"""Utility modules for ctrf-converter."""

from ctrf_converter.utils.environment import parse_environment_properties
from ctrf_converter.utils.numbers import parse_int, seconds_to_milliseconds
from ctrf_converter.utils.terminal import terminal
from ctrf_converter.utils.timestamps import parse_date
from ctrf_converter.utils.xml_loader import load_xml

__all__ = [
    "terminal",
    "load_xml",
    "parse_date",
    "parse_int",
    "seconds_to_milliseconds",
    "parse_environment_properties",
]

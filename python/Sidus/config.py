#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
This module handles conversion options

Defaults come from default_config.json next to this file, an
optional user config file overrides them and command line values
override both.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Type, TypeVar

from Sidus.format_detect import Endian, Epoch
from Sidus.pipeline import SortOrder
from Sidus.serializers import OutputConfig, OutputFormat, Precision

logger = logging.getLogger("Sidus.Config")

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class ConvertOptions:
    apparent_magnitude: Optional[int] = None
    filter_magnitude: Optional[float] = None
    epoch: Epoch = Epoch.AUTO
    endian: Endian = Endian.AUTO
    sort: SortOrder = SortOrder.NONE
    info_only: bool = False
    output: OutputConfig = field(default_factory=OutputConfig)


def _enum_option(enum_type: Type[E], option: str, value: Any) -> E:
    if isinstance(value, enum_type):
        return value
    for member in enum_type:
        if str(value).lower() == str(member.value).lower():
            return member
    choices = ", ".join(str(m.value) for m in enum_type)
    raise ValueError(f"invalid value {value!r} for {option}, expected one of: {choices}")


class Config:
    def __init__(self, config_file: Optional[Path] = None):
        """
        load all settings from config file
        """
        self.config_file_path = config_file
        self.default_file_path = Path(__file__).parent / "default_config.json"
        self.load_config()

    def load_config(self):
        if self.config_file_path is None or not os.path.exists(self.config_file_path):
            if self.config_file_path is not None:
                logger.warning(f"Config file {self.config_file_path} not found")
            self._config_dict = {}
        else:
            with open(self.config_file_path, "r") as config_file:
                logger.info(f"Loading config from {self.config_file_path}")
                self._config_dict = json.load(config_file)

        with open(self.default_file_path, "r") as config_file:
            self._default_config_dict = json.load(config_file)

    def get_option(self, option, default: Any = None):
        return self._config_dict.get(
            option, self._default_config_dict.get(option, default)
        )

    def set_option(self, option, value):
        """Session only, never written back"""
        self._config_dict[option] = value

    def resolve(self, **overrides) -> ConvertOptions:
        """
        Build ConvertOptions, keyword arguments that are not None
        take precedence over the config files
        """
        for option, value in overrides.items():
            if value is not None:
                self.set_option(option, value)

        apparent_magnitude = self.get_option("apparent_magnitude")
        if apparent_magnitude is not None:
            apparent_magnitude = int(apparent_magnitude)
            if apparent_magnitude < 0:
                raise ValueError(
                    f"invalid value {apparent_magnitude} for apparent_magnitude"
                )
        filter_magnitude = self.get_option("filter_magnitude")
        if filter_magnitude is not None:
            filter_magnitude = float(filter_magnitude)

        output = OutputConfig(
            precision=_enum_option(Precision, "precision", self.get_option("precision")),
            names=bool(self.get_option("names", False)),
            spectral_type=bool(self.get_option("spectral_type", False)),
            output_format=_enum_option(
                OutputFormat, "output_format", self.get_option("output_format")
            ),
        )
        return ConvertOptions(
            apparent_magnitude=apparent_magnitude,
            filter_magnitude=filter_magnitude,
            epoch=_enum_option(Epoch, "epoch", self.get_option("epoch")),
            endian=_enum_option(Endian, "endian", self.get_option("endian")),
            sort=_enum_option(SortOrder, "sort", self.get_option("sort")),
            info_only=bool(self.get_option("info_only", False)),
            output=output,
        )

    def __str__(self):
        return str(self._config_dict)

    def __repr__(self):
        return str(self._config_dict)

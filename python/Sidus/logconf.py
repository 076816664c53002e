#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Logging setup for the sidus command line tool

Logging is bootstrapped with a basic configuration writing to stderr,
so stdout stays reserved for the converted catalog. If a logging
configuration file is available (JSON5, logging.config.dictConfig
schema) it replaces the basic configuration.
"""

import datetime
import logging
import logging.config
from pathlib import Path
from typing import Optional, TextIO

import json5

DEFAULT_LOG_CONF = Path("sidus_logconf.json")
BASIC_FORMAT = "%(asctime)s %(name)s: %(levelname)s %(message)s"


def read_config(file: TextIO):
    """
    Read logging configuration from the specified file handle and apply it.
    """
    config = json5.load(file)
    logging.config.dictConfig(config)


def apply_config_file(log_conf: Path):
    if not log_conf.exists():
        raise FileNotFoundError(f"Logging configuration {log_conf} does not exist.")
    with open(log_conf, "r") as f:
        read_config(f)


def configure_logging(
    log_conf: Optional[Path] = None, verbose: bool = False, log_to_file: bool = False
) -> logging.Logger:
    """
    Set up the root logger and return it.

    An explicitly passed log_conf must exist, the default
    sidus_logconf.json in the working directory is optional.
    """
    logging.basicConfig(format=BASIC_FORMAT)
    rlogger = logging.getLogger()
    rlogger.setLevel(logging.WARNING)

    if log_conf is not None:
        apply_config_file(log_conf)
    else:
        try:
            apply_config_file(DEFAULT_LOG_CONF)
        except FileNotFoundError:
            rlogger.debug("No logging configuration found, using basic configuration")

    if verbose:
        rlogger.setLevel(logging.DEBUG)

    if log_to_file:
        datenow = datetime.datetime.now()
        fh = logging.FileHandler(f"sidus-{datenow:%Y%m%d-%H_%M_%S}.log")
        fh.setFormatter(logging.Formatter(BASIC_FORMAT))
        fh.setLevel(rlogger.level)
        rlogger.addHandler(fh)

    return rlogger

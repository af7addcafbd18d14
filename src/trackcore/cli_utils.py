########## LICENCE ##########
# trackcore
# Copyright (C) 2024 Genome Research Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#############################

"""
Functions that may force the program to exit, meant to be called by the CLI commands.
"""

import errno
import logging
import os
import sys
from typing import Optional

from .codon_table import CodonTable
from .config import TrackConfig, load_config
from .errors import InvalidConfig


def load_codon_table(fp: Optional[str]) -> CodonTable:
    if not fp:
        logging.info("Codon table not specified, the default one will be used.")

    logging.debug("Loading codon table...")
    try:
        return CodonTable.load(fp)
    except ValueError as ex:
        logging.critical(ex.args[0])
        logging.critical("Failed to load codon table!")
        sys.exit(1)


def load_track_config(fp: Optional[str], **overrides) -> TrackConfig:
    try:
        data = load_config(fp).model_dump() if fp else {}
        data.update({
            k: v
            for k, v in overrides.items()
            if v is not None
        })
        config = TrackConfig(**data)

        # Check input files exist
        for input_fp in config.input_file_paths:
            if not os.path.isfile(input_fp):
                raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), input_fp)

    except InvalidConfig as ex:
        logging.critical("Invalid configuration%s!" % (': ' + ex.args[0] if ex.args else ''))
        sys.exit(1)

    except (PermissionError, FileNotFoundError) as ex:
        logging.critical(ex)
        sys.exit(1)

    return config

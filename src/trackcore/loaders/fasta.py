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

from __future__ import annotations

import logging
from typing import Optional

from pysam import FastaFile

from ..errors import SequenceNotFound


def get_fasta_file(fp: str) -> FastaFile:
    try:
        return FastaFile(fp)
    except IOError as ex:
        logging.critical("Failed to load reference file!")
        raise ex


class FastaSequenceProvider:
    """Sequence provider backed by an indexed FASTA file"""

    __slots__ = {'_fasta'}

    def __init__(self, fp: str) -> None:
        self._fasta = get_fasta_file(fp)

    def __enter__(self) -> FastaSequenceProvider:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        self._fasta.close()

    def fetch(self, chromosome: str, start: int, end: int) -> str:
        if chromosome not in self._fasta.references:
            raise SequenceNotFound(chromosome)

        return self._fasta.fetch(reference=chromosome, start=start, end=end).upper()

    def get_sequence(self, chromosome: str, start: int, end: int) -> Optional[str]:
        try:
            seq = self.fetch(chromosome, start, end)
        except (SequenceNotFound, ValueError, IndexError) as ex:
            logging.debug("Reference sequence at %s:%d-%d not available: %s" % (chromosome, start, end, ex))
            return None

        return seq if seq else None

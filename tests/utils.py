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

import os
import pathlib

from trackcore.codon_table import CodonTable
from trackcore.sequence_provider import SequenceRepository

from .constants import CHR1_SEQ, CHR2_SEQ


def get_data_file_path(fp):
    return os.path.join(pathlib.Path(__file__).parent.absolute(), 'data', fp)


def load_codon_table():
    return CodonTable.load()


def get_sequence_repository():
    repository = SequenceRepository()
    repository.register_sequence('chr1', 0, CHR1_SEQ)
    repository.register_sequence('chr2', 0, CHR2_SEQ)
    return repository


class CountingSequenceProvider:
    def __init__(self, repository):
        self.repository = repository
        self.calls = 0

    def get_sequence(self, chromosome, start, end):
        self.calls += 1
        return self.repository.get_sequence(chromosome, start, end)

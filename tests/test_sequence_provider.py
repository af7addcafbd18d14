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

import pytest

from trackcore.errors import SequenceNotFound
from trackcore.loaders.fasta import FastaSequenceProvider

from .constants import CHR1_SEQ, REF_FASTA_FP
from .utils import get_data_file_path, get_sequence_repository

ref_fasta_fp = get_data_file_path(REF_FASTA_FP)


@pytest.mark.parametrize('chromosome,start,end,exp', [
    ('chr1', 2, 5, 'ATG'),
    ('chr1', 0, 40, CHR1_SEQ),
    ('chr1', 38, 42, None),
    ('chr2', 0, 3, 'TTA'),
    ('chr3', 0, 3, None),
    ('chr1', 5, 2, None)
])
def test_sequence_repository_get_sequence(chromosome, start, end, exp):
    assert get_sequence_repository().get_sequence(chromosome, start, end) == exp


def test_sequence_repository_register_sequence():
    repository = get_sequence_repository()
    repository.register_sequence('chr3', 100, 'acgtNacgt')
    assert repository.get_sequence('chr1', 2, 5) == CHR1_SEQ[2:5]
    assert repository.get_sequence('chr3', 103, 106) == 'TNA'


def test_sequence_repository_register_sequence_invalid():
    with pytest.raises(ValueError):
        get_sequence_repository().register_sequence('chr3', -1, 'ACGT')


@pytest.mark.parametrize('chromosome,start,end,exp', [
    ('chr1', 2, 5, 'ATG'),
    ('chr2', 15, 20, 'CATGG'),
    ('chr3', 0, 3, None)
])
def test_fasta_sequence_provider_get_sequence(chromosome, start, end, exp):
    with FastaSequenceProvider(ref_fasta_fp) as fasta:
        assert fasta.get_sequence(chromosome, start, end) == exp


def test_fasta_sequence_provider_fetch_missing():
    with FastaSequenceProvider(ref_fasta_fp) as fasta:
        with pytest.raises(SequenceNotFound):
            fasta.fetch('chr3', 0, 3)


def test_fasta_sequence_provider_missing_file():
    with pytest.raises(IOError):
        FastaSequenceProvider(get_data_file_path('missing.fa'))

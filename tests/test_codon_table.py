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

from contextlib import nullcontext

import pytest

from trackcore.codon_table import CodonTable
from trackcore.codon_table_loader import _parse_codon_table_row, load_codon_table_rows
from trackcore.errors import CodonNotFound
from trackcore.strings.strand import Strand
from trackcore.uint_range import UIntRange
from trackcore.utils import get_default_codon_table_path

from .constants import PEPTIDE
from .utils import get_data_file_path, load_codon_table


@pytest.mark.parametrize('row,valid', [
    (('ACC', 'X', '0.23', 'RANK2'), True),
    (('TTT', 'STOP', '0.23', 'RANK2'), True),
    (('ACC', 'X', '0.23', 'RANKZ'), False),
    (('ACC', 'X', '2.23', 'RANK2'), False),
    (('ACC', 'XYZ', '0.23', 'RANK2'), False),
    (('ZZZ', 'X', '0.23', 'RANK2'), False),
    (('ACC', 'X', '0.23'), False)
])
def test_parse_codon_table_row(row, valid):
    with pytest.raises(ValueError) if not valid else nullcontext():
        _parse_codon_table_row(row)


def test_load_codon_table_rows():
    rows = load_codon_table_rows(get_default_codon_table_path())
    assert len(rows) == 64
    assert len(set(r.codon for r in rows)) == 64


def test_load_codon_table_invalid():
    with pytest.raises(ValueError):
        CodonTable.load(get_data_file_path('ref.fa'))


def test_codon_table_load_default():
    codon_table = load_codon_table()
    assert len(codon_table.codon_to_aa) == 64
    aas = set(codon_table.codon_to_aa.values())
    assert 'STOP' in aas
    assert len(aas) == 21


@pytest.mark.parametrize('row', [
    ('ACC', 'T', '0.23', 'RANK2'),
    ('ACC', 'T', '0.57', 'RANK1')
])
def test_parse_codon_table_row_discards_usage(row):
    r = _parse_codon_table_row(row)
    assert (r.codon, r.aa) == ('ACC', 'T')


@pytest.mark.parametrize('codon,exp', [
    ('ATG', 'M'),
    ('TGG', 'W'),
    ('TAA', 'STOP'),
    ('GCC', 'A')
])
def test_codon_table_translate(codon, exp):
    assert load_codon_table().translate(codon) == exp


@pytest.mark.parametrize('codon', ['NNN', 'AT'])
def test_codon_table_translate_invalid(codon):
    with pytest.raises(CodonNotFound):
        load_codon_table().translate(codon)


@pytest.mark.parametrize('bases,strand,exp', [
    ('ATGGCCAAATTTGGGTAA', Strand.PLUS, PEPTIDE),
    ('atggccaaatttgggtaa', Strand.PLUS, PEPTIDE),
    (b'ATGGCCAAATTTGGGTAA', Strand.PLUS, PEPTIDE),
    ('ATGGCCAAATTTGGGTAAGC', Strand.PLUS, PEPTIDE),
    ('TTACCCAAATTTGGCCAT', Strand.MINUS, PEPTIDE),
    ('ATGNCCAAA', Strand.PLUS, 'MXK'),
    ('AT', Strand.PLUS, '')
])
def test_codon_table_translate_sequence(bases, strand, exp):
    aa_seq = load_codon_table().translate_sequence(bases, 10, strand)
    assert str(aa_seq) == exp
    assert aa_seq.start == 10
    assert aa_seq.end == 10 + len(bases)


@pytest.mark.parametrize('strand,index,exp', [
    (Strand.PLUS, 0, UIntRange(10, 13)),
    (Strand.PLUS, 2, UIntRange(16, 19)),
    (Strand.MINUS, 0, UIntRange(17, 20)),
    (Strand.MINUS, 2, UIntRange(11, 14)),
    (Strand.UNKNOWN, 1, UIntRange(13, 16))
])
def test_amino_acid_sequence_get_codon_range(strand, index, exp):

    # Ten bases: three complete codons and a trailing base
    aa_seq = load_codon_table().translate_sequence('ATGGCCAAAT', 10, strand)
    assert len(aa_seq) == 3
    assert aa_seq.get_codon_range(index) == exp


@pytest.mark.parametrize('index', [-1, 3])
def test_amino_acid_sequence_get_codon_range_invalid(index):
    aa_seq = load_codon_table().translate_sequence('ATGGCCAAAT', 10, Strand.PLUS)
    with pytest.raises(IndexError):
        aa_seq.get_codon_range(index)

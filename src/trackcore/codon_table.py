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

from dataclasses import dataclass

from .amino_acid_sequence import AminoAcidSequence
from .codon_table_loader import load_codon_table_rows
from .codon_table_row import CodonTableRow
from .constants import UNKNOWN_AA
from .errors import CodonNotFound
from .strings.codon import Codon
from .strings.strand import Strand
from .strings.translation_symbol import TranslationSymbol
from .utils import get_default_codon_table_path, reverse_complement

CodonToTransl = dict[Codon, TranslationSymbol]

UNKNOWN_SYMBOL = TranslationSymbol(UNKNOWN_AA)


@dataclass(slots=True, frozen=True)
class CodonTable:
    codon_to_aa: CodonToTransl

    @classmethod
    def from_list(cls, rows: list[CodonTableRow]) -> CodonTable:
        return cls({
            r.codon: r.aa
            for r in rows
        })

    @classmethod
    def load(cls, fp: str | None = None) -> CodonTable:
        return cls.from_list(load_codon_table_rows(
            fp if fp is not None else get_default_codon_table_path()))

    def translate(self, codon: str) -> TranslationSymbol:
        try:
            return self.codon_to_aa[codon]
        except KeyError:
            raise CodonNotFound(codon)

    def translate_sequence(self, bases: str | bytes, start: int, strand: Strand) -> AminoAcidSequence:
        """
        Translate the complete codons of a genomic sequence

        On the minus strand the sequence is reverse complemented first, so that
        the amino acids are always listed from the 5' end of the transcript.
        Codons including ambiguous nucleotides translate to an unknown symbol.
        """

        seq = (bases.decode('ascii') if isinstance(bases, bytes) else bases).upper()
        if strand.is_minus:
            seq = reverse_complement(seq)

        symbols = tuple(
            self.codon_to_aa.get(seq[i:i + 3], UNKNOWN_SYMBOL)
            for i in range(0, len(seq) - 2, 3)
        )

        return AminoAcidSequence(strand, start, len(seq), symbols)

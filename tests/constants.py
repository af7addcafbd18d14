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

REF_FASTA_FP = 'ref.fa'
DESCRIPTIONS_FP = 'descriptions.txt'

# Reference sequences (also in the test FASTA file)
CHR1_SEQ = 'CCATGGCCAAATTTGGGTAACCGTACGTACGTTGCATGCA'
CHR2_SEQ = 'TTACCCAAATTTGGCCATGG'

# Translation of chr1:2-20 (plus strand) and chr2:0-18 (minus strand)
PEPTIDE = 'MAKFG*'

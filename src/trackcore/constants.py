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

# Stop symbol (codon table)
STOP = 'STOP'

# Single-letter rendering of the stop symbol
STOP_LETTER = '*'

# Symbol of codons that can't be translated (e.g., containing N)
UNKNOWN_AA = 'X'

# Path to the package data directory
DATA_PATH = 'data'

# Default codon table file name
CODON_TABLE_FN = 'default_codon_table.csv'

# Description cache size (number of records)
MIN_DESCRIPTION_CACHE_SIZE = 10
DEFAULT_DESCRIPTION_CACHE_SIZE = 10000

# Separator of the fields of a formatted description
DESCRIPTION_LINE_BREAK = '<br>'

# Unset reading frame and mRNA base offset
UNSET = -1

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

import logging
from typing import Optional, TextIO

import click

from . import __version__
from .cli_utils import load_codon_table, load_track_config
from .common_cli import existing_file, log_option, parse_description_key
from .description_cache import DescriptionCache
from .errors import GenomicPositionOutOfBounds
from .exon import Exon
from .loaders.fasta import FastaSequenceProvider
from .strings.strand import Strand
from .utils import split_whitespace


def load_descriptions(
    fh: TextIO,
    cache: DescriptionCache,
    chr_col: str,
    pos_col: str,
    value_col: str
) -> int:
    """Stream whitespace-delimited description lines into the cache"""

    header = fh.readline()
    if not header.strip():
        raise click.UsageError("Missing header line!")
    cache.set_header_line(header)

    try:
        chr_i, pos_i, value_i = [
            cache.header_tokens.index(col)
            for col in (chr_col, pos_col, value_col)
        ]
    except ValueError:
        raise click.UsageError(
            "Header line lacks one of the key columns (%s, %s, %s)!" %
            (chr_col, pos_col, value_col))

    n = 0
    skipped = 0
    for line in fh:
        tokens = split_whitespace(line)
        if not tokens:
            continue
        try:
            cache.add(tokens[chr_i], int(tokens[pos_i]), float(tokens[value_i]), line.strip())
            n += 1
        except (IndexError, ValueError):
            skipped += 1

    if skipped > 0:
        logging.warning("%d malformed description lines were skipped!" % skipped)

    logging.debug("%d descriptions loaded (%d cached)." % (n, len(cache)))
    return n


@click.group()
@click.version_option(__version__)
def main() -> None:
    pass


@main.command()
@click.argument('chromosome')
@click.argument('start', type=click.IntRange(min=0))
@click.argument('end', type=click.IntRange(min=0))
@click.argument('strand', type=click.Choice([s.value for s in Strand]))
@click.argument('position', type=int)
@click.option('--coding-start', type=int, help="Coding region start (0-based)")
@click.option('--coding-end', type=int, help="Coding region end (exclusive)")
@click.option('--phase', type=click.IntRange(0, 2), help="Phase of the coding region")
@click.option('--frame', 'reading_frame', type=click.IntRange(min=0), help="Reading frame offset")
@click.option('--mrna-base', type=click.IntRange(min=0), help="Offset of the first coding base in the transcript")
@click.option('--utr', is_flag=True, help="The whole exon is untranslated")
@click.option('--ref-fasta', 'ref_fasta_fp', type=existing_file, help="Reference FASTA file path")
@click.option('--codon-table', 'codon_table_fp', type=existing_file, help="Codon table file path")
@click.option('-c', '--config', 'config_fp', type=existing_file, help="Configuration file path")
@log_option
@click.pass_context
def exon(
    ctx: click.Context,
    chromosome: str,
    start: int,
    end: int,
    strand: str,
    position: int,
    coding_start: Optional[int],
    coding_end: Optional[int],
    phase: Optional[int],
    reading_frame: Optional[int],
    mrna_base: Optional[int],
    utr: bool,
    ref_fasta_fp: Optional[str],
    codon_table_fp: Optional[str],
    config_fp: Optional[str]
) -> None:
    """Amino acid number and translation at a position of an exon"""

    # Command line paths take precedence over the configuration file
    config = load_track_config(
        config_fp, ref_fasta_fp=ref_fasta_fp, codon_table_fp=codon_table_fp)

    try:
        e = Exon(chromosome, start, end, Strand.parse(strand))
    except ValueError as ex:
        raise click.BadParameter(ex.args[0])

    if coding_start is not None:
        e.coding_start = coding_start
    if coding_end is not None:
        e.coding_end = coding_end
    if utr:
        e.utr = True
    if phase is not None:
        e.set_phase(phase)
    if reading_frame is not None:
        e.reading_frame = reading_frame
    if mrna_base is not None:
        e.mrna_base = mrna_base

    try:
        aa_number = e.get_amino_acid_number(position)
    except GenomicPositionOutOfBounds as ex:
        logging.critical(ex.args[0])
        ctx.exit(1)

    click.echo(f"amino_acid_number\t{aa_number}")

    if config.ref_fasta_fp:
        codon_table = load_codon_table(config.codon_table_fp)
        try:
            with FastaSequenceProvider(config.ref_fasta_fp) as fasta:
                aa_seq = e.get_amino_acid_sequence(fasta, codon_table)
        except IOError as ex:
            logging.critical(ex)
            ctx.exit(1)

        if aa_seq is None:
            logging.warning("No translation available for exon %s!" % e.locus)
        else:
            click.echo(f"amino_acid_sequence\t{aa_seq}")


@main.command()
@click.argument('descriptions', type=click.File('r'))
@click.option('-c', '--config', 'config_fp', type=existing_file, help="Configuration file path")
@click.option('-q', '--query', 'queries', multiple=True, help="Description key (CHR:POS:VALUE)")
@click.option('--chr-col', default='CHR', show_default=True, help="Chromosome column")
@click.option('--pos-col', default='BP', show_default=True, help="Position column")
@click.option('--value-col', default='P', show_default=True, help="Value column")
@click.option('--cache-size', type=int, help="Maximum number of cached descriptions")
@click.option('--dump', is_flag=True, help="Print the cached descriptions as a table")
@log_option
def describe(
    descriptions: TextIO,
    config_fp: Optional[str],
    queries: tuple[str, ...],
    chr_col: str,
    pos_col: str,
    value_col: str,
    cache_size: Optional[int],
    dump: bool
) -> None:
    """Look up point annotation descriptions"""

    keys = [parse_description_key(q) for q in queries]

    config = load_track_config(config_fp, description_cache_size=cache_size)
    cache = config.create_description_cache(line_break='\n')

    load_descriptions(descriptions, cache, chr_col, pos_col, value_col)

    for query, key in zip(queries, keys):
        s = cache.get_description_string(*key)
        if s is None:
            logging.warning("Description not found for '%s'!" % query)
        else:
            click.echo(f"# {query}")
            click.echo(s, nl=False)

    if dump:
        click.echo(cache.to_frame().to_csv(sep='\t', index=False), nl=False)

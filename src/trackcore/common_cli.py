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
import click


existing_file = click.Path(exists=True, file_okay=True, dir_okay=False)


def set_logger(ctx: click.Context, param: click.Parameter, value: str) -> None:
    logging.basicConfig(level=logging._nameToLevel[value.upper()])


def log_option(f):
    return click.option(
        '--log',
        default='WARNING',
        type=click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False),
        callback=set_logger,
        expose_value=False,
        is_eager=True,
        help="Logging level")(f)


def parse_description_key(s: str) -> tuple[str, int, float]:
    try:
        chromosome, position, value = s.rsplit(':', 2)
        return chromosome, int(position), float(value)
    except ValueError:
        raise click.BadParameter(f"invalid description key '{s}' (expected CHR:POS:VALUE)")

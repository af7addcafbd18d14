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

import json

import pytest

from trackcore.config import TrackConfig, load_config
from trackcore.constants import DEFAULT_DESCRIPTION_CACHE_SIZE, MIN_DESCRIPTION_CACHE_SIZE
from trackcore.errors import InvalidConfig


def test_track_config_default():
    config = TrackConfig()
    assert config.description_cache_size == DEFAULT_DESCRIPTION_CACHE_SIZE
    assert config.input_file_paths == []


def test_track_config_alias():
    config = TrackConfig(descriptionCacheSize=50, refFASTAFilePath='ref.fa')
    assert config.description_cache_size == 50
    assert config.input_file_paths == ['ref.fa']


@pytest.mark.parametrize('size,exp', [(-10, 10), (0, 10), (5, 10), (500, 500)])
def test_track_config_create_description_cache(size, exp):
    cache = TrackConfig(description_cache_size=size).create_description_cache()
    assert cache.max_size == exp
    assert len(cache) == 0


def test_load_config(tmp_path):
    fp = tmp_path / 'config.json'
    TrackConfig(description_cache_size=123, codon_table_fp='codons.csv').write(str(fp))

    with open(fp) as fh:
        assert json.load(fh)['descriptionCacheSize'] == 123

    config = load_config(str(fp))
    assert config.description_cache_size == 123
    assert config.codon_table_fp == 'codons.csv'
    assert config.ref_fasta_fp is None


@pytest.mark.parametrize('content', [
    'not a JSON',
    '[1, 2]',
    '{"descriptionCacheSize": "many"}'
])
def test_load_config_invalid(tmp_path, content):
    fp = tmp_path / 'config.json'
    fp.write_text(content)
    with pytest.raises(InvalidConfig):
        load_config(str(fp))


def test_load_config_cache_size_clamped(tmp_path):
    fp = tmp_path / 'config.json'
    fp.write_text('{"descriptionCacheSize": 0}')
    config = load_config(str(fp))
    assert config.description_cache_size == 0
    assert config.create_description_cache().max_size == MIN_DESCRIPTION_CACHE_SIZE

import pytest

from models import Place


def make_place(name, region='IL', identifier=1, **kw):
    fields = dict(population=100, area=1.5, latitude=40.0, longitude=-89.0,
                  road_intersection=7, distance=0.25)
    fields.update(kw)
    return Place(identifier=identifier, region=region, name=name, **fields)


def place_line(identifier, region, name, population, area, latitude, longitude,
               road_intersection, distance):
    """Render one record in the fixed-width places layout."""
    return (f"{identifier:>8}{region:2}{name:<50}{population:>8}{area:>10}"
            f"{latitude:>10}{longitude:>10}{road_intersection:>8}{distance:>8}")


@pytest.fixture
def place_factory():
    return make_place


@pytest.fixture
def places_file(tmp_path):
    lines = [
        place_line(1767000, 'IL', 'Springfield', 116250, '59.4900', '39.7836', '-89.6538', 3211, '1.2500'),
        place_line(2567000, 'MA', 'Springfield', 152082, '32.1000', '42.1155', '-72.5400', 4107, '0.8000'),
        '',
        place_line(1714000, 'IL', 'Chicago', 2896016, '227.1300', '41.8376', '-87.6818', 1002, '0.5000'),
        'garbage line that is far too short',
        place_line(3651000, 'NY', 'New York', 8008278, '303.3000', '40.6643', '-73.9385', 5501, '0.1000'),
    ]
    path = tmp_path / 'named-places.txt'
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path


@pytest.fixture
def states_file(tmp_path):
    path = tmp_path / 'states.txt'
    path.write_text('IL Illinois\nMA Massachusetts\nNY New York\nX\n', encoding='utf-8')
    return path

import numpy as np
import pytest

from Sidus.pipeline import SortOrder, keep_star, select_stars
from Sidus.star_record import StarRecord


def star(ra: float, dec: float, mag: float, name: str = "") -> StarRecord:
    return StarRecord(
        name=name,
        right_ascension=ra,
        declination=dec,
        identifier=0.0,
        magnitude=np.float32(mag),
        proper_motion_ra=np.float32(0),
        proper_motion_dec=np.float32(0),
        radial_velocity=0.0,
        spectral_type="A0",
    )


def indexed(*stars):
    return list(enumerate(stars))


@pytest.mark.unit
class TestFiltering:
    def test_threshold(self):
        result = select_stars(
            indexed(star(1, 1, 4.5), star(2, 2, 3.9), star(3, 3, 4.0)),
            filter_magnitude=4.0,
        )
        assert [s.right_ascension for _, s in result] == [2, 3]

    def test_no_threshold_keeps_faint_stars(self):
        result = select_stars(indexed(star(1, 1, 15.0), star(2, 2, -1.4)))
        assert len(result) == 2

    @pytest.mark.parametrize("threshold", [None, 0.0, 100.0])
    def test_blank_records_always_dropped(self, threshold):
        result = select_stars(
            indexed(star(0, 0, 0), star(1, 0, 0), star(0, 0, 0)),
            filter_magnitude=threshold,
        )
        assert [s.right_ascension for _, s in result] == [1]

    def test_partially_zero_is_kept(self):
        assert keep_star(star(0, 0, 1.0))
        assert keep_star(star(0, 1.0, 0))
        assert not keep_star(star(0, 0, 0))

    def test_named_stars_dropped_by_threshold(self):
        stars = indexed(star(1.0, -0.5, 4.5, "ABC"), star(2.0, 0.5, 4.5, "ABC"))
        assert select_stars(stars, filter_magnitude=4.0) == []

    def test_empty_input(self):
        for sort in SortOrder:
            assert select_stars([], sort=sort) == []


@pytest.mark.unit
class TestOrdering:
    def _stars(self):
        return indexed(
            star(0.3, 0, 5.0, "a"),
            star(0.1, 0, 2.0, "b"),
            star(0.2, 0, 5.0, "c"),
            star(0.1, 0, -1.0, "d"),
            star(0.4, 0, 2.0, "e"),
        )

    def test_none_keeps_catalog_order(self):
        result = select_stars(self._stars())
        assert [s.name for _, s in result] == ["a", "b", "c", "d", "e"]

    def test_by_magnitude_ascending_stable(self):
        result = select_stars(self._stars(), sort=SortOrder.MAGNITUDE)
        assert [s.name for _, s in result] == ["d", "b", "e", "a", "c"]

    def test_by_right_ascension_stable(self):
        result = select_stars(self._stars(), sort=SortOrder.RIGHT_ASCENSION)
        assert [s.name for _, s in result] == ["b", "d", "c", "a", "e"]

    def test_output_indices_contiguous(self):
        stars = self._stars() + [(5, star(0, 0, 0, "blank"))]
        for sort in SortOrder:
            result = select_stars(stars, filter_magnitude=4.0, sort=sort)
            assert [i for i, _ in result] == list(range(len(result)))
            assert len(result) == 3

    def test_all_equal_keys_keep_order(self):
        stars = indexed(*[star(1.0, 0, 3.0, str(i)) for i in range(20)])
        for sort in SortOrder:
            result = select_stars(stars, sort=sort)
            assert [s.name for _, s in result] == [str(i) for i in range(20)]

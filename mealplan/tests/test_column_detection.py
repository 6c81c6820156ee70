import unittest

from mealplan.domain.ColumnMap import ColumnMap
from mealplan.logic.parsing.columns import (
    default_columns_for_site,
    detect_header_columns,
    merge_columns,
    resolve_columns,
)
from mealplan.tests.workbook_builder import MAIN_HEADER, grid


class TestHeaderDetection(unittest.TestCase):

    def test_detects_meal_columns_from_header_row(self):
        detected = detect_header_columns(grid([["식단"], MAIN_HEADER]))
        self.assertEqual(detected["breakfast"], [1])
        self.assertEqual(detected["lunch"], [3, 4])
        self.assertEqual(detected["dinner"], [5, 6])
        self.assertEqual(detected["night"], [7, 8])
        self.assertEqual(detected["salad"], [])
        self.assertNotIn("corner", detected)

    def test_keywords_match_inside_longer_labels(self):
        detected = detect_header_columns(grid([[None, "조 식", "중식(12:00)", "  석식\n17:30 "]]))
        # "조 식" is split by a space, so it is not the keyword
        self.assertEqual(detected["breakfast"], [])
        self.assertEqual(detected["lunch"], [2])
        self.assertEqual(detected["dinner"], [3])

    def test_corner_cells_do_not_count_as_meal_columns(self):
        detected = detect_header_columns(grid([[None, "조식", "A코너 중식", "B 코너(중식)", "중식"]]))
        self.assertEqual(detected["breakfast"], [1])
        self.assertEqual(detected["lunch"], [4])

    def test_scan_stops_after_limit(self):
        rows = [["noise"]] * 35 + [[None, "조식"]]
        self.assertEqual(detect_header_columns(grid(rows))["breakfast"], [])
        self.assertEqual(detect_header_columns(grid(rows[1:]))["breakfast"], [1])

    def test_empty_grid(self):
        detected = detect_header_columns([])
        self.assertTrue(all(cols == [] for cols in detected.values()))


class TestFallbackColumns(unittest.TestCase):

    def test_main_template(self):
        cols = default_columns_for_site("main")
        self.assertEqual(cols.to_dict(), {
            "breakfast": [1], "lunch": [3, 4], "dinner": [5, 6], "extras": {"night": [7, 8]},
        })

    def test_other_sites_use_cancer_template(self):
        expected = {
            "breakfast": [1, 2], "lunch": [3, 4], "dinner": [5, 6],
            "extras": {"salad": [7], "night": [8]},
        }
        for site in ("cancer", "annex", "MAIN", ""):
            self.assertEqual(default_columns_for_site(site).to_dict(), expected, site)

    def test_fallback_is_a_fresh_copy(self):
        default_columns_for_site("main").lunch.append(99)
        self.assertEqual(default_columns_for_site("main").lunch, [3, 4])


class TestMergeColumns(unittest.TestCase):

    def test_detected_meal_wins_per_category(self):
        detected = {"breakfast": [], "lunch": [2], "dinner": [], "night": [9], "salad": [10]}
        merged = merge_columns(detected, default_columns_for_site("cancer"))
        self.assertEqual(merged, ColumnMap(
            breakfast=[1, 2], lunch=[2], dinner=[5, 6], extras={"salad": [7], "night": [8]},
        ))

    def test_extras_always_come_from_fallback(self):
        detected = {"breakfast": [1], "lunch": [3], "dinner": [5], "night": [11], "salad": [12]}
        merged = merge_columns(detected, default_columns_for_site("main"))
        self.assertEqual(merged.extras, {"night": [7, 8]})

    def test_resolve_with_no_headers_uses_site_template(self):
        rows = grid([["1/12"], [None, "밥"]])
        self.assertEqual(resolve_columns(rows, "cancer"), default_columns_for_site("cancer"))
        self.assertEqual(resolve_columns(rows, "somewhere"), default_columns_for_site("cancer"))


if __name__ == '__main__':
    unittest.main()

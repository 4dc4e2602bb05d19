"""Unit tests for signature sizing and coordinate resolution."""

import unittest

from signstamp.pdf_processor.coordinates import clamp, fit_to_box, resolve


class TestClamp(unittest.TestCase):
    """Test cases for clamp."""

    def test_value_inside_range_is_unchanged(self):
        self.assertEqual(5, clamp(5, 0, 10))

    def test_value_outside_range_is_pinned(self):
        self.assertEqual(0, clamp(-3, 0, 10))
        self.assertEqual(10, clamp(42, 0, 10))

    def test_inverted_range_pins_to_low(self):
        """An image wider than the page gives an inverted range."""
        self.assertEqual(0, clamp(50, 0, -20))


class TestFitToBox(unittest.TestCase):
    """Test cases for fit_to_box."""

    def test_fit_preserves_aspect_ratio_and_stays_in_box(self):
        """Scaled box never exceeds the bounds and keeps the source ratio."""
        max_width, max_height = 153.0, 79.2
        for img_width, img_height in [(300, 100), (100, 300), (50, 50), (1200, 90), (7, 400)]:
            with self.subTest(image=(img_width, img_height)):
                # Act
                box = fit_to_box(img_width, img_height, max_width, max_height)

                # Assert
                self.assertLessEqual(box.width, max_width + 1e-9)
                self.assertLessEqual(box.height, max_height + 1e-9)
                self.assertAlmostEqual(
                    img_width / img_height, box.width / box.height, places=9
                )

    def test_fit_is_limited_by_width(self):
        box = fit_to_box(300, 100, 153, 79.2)

        self.assertAlmostEqual(153.0, box.width)
        self.assertAlmostEqual(51.0, box.height)

    def test_fit_is_limited_by_height(self):
        box = fit_to_box(100, 300, 153, 79.2)

        self.assertAlmostEqual(26.4, box.width)
        self.assertAlmostEqual(79.2, box.height)

    def test_small_image_is_scaled_up(self):
        box = fit_to_box(10, 5, 100, 100)

        self.assertAlmostEqual(100.0, box.width)
        self.assertAlmostEqual(50.0, box.height)


class TestResolve(unittest.TestCase):
    """Test cases for resolve."""

    def test_converts_top_left_y_to_native(self):
        """800 high page, 400 from the top, 80 high image -> 320 from the bottom."""
        # Act
        placement = resolve(1000, 800, 250, 80, 100, 400, 200, 400)

        # Assert
        self.assertEqual(100, placement.x)
        self.assertEqual(320, placement.y)
        self.assertEqual(250, placement.width)
        self.assertEqual(80, placement.height)

    def test_uses_defaults_when_request_missing(self):
        placement = resolve(612, 792, 153, 51, None, None, 200, 400)

        self.assertEqual(200, placement.x)
        self.assertEqual(792 - 400 - 51, placement.y)

    def test_zero_request_is_not_treated_as_missing(self):
        placement = resolve(612, 792, 153, 51, 0, 0, 200, 400)

        self.assertEqual(0, placement.x)
        self.assertEqual(792 - 51, placement.y)

    def test_far_right_request_clamps_to_page_edge(self):
        placement = resolve(612, 792, 153, 51, 612 + 1000, 100, 200, 400)

        self.assertEqual(612 - 153, placement.x)

    def test_request_below_page_clamps_to_bottom(self):
        placement = resolve(612, 792, 153, 51, 10, 5000, 200, 400)

        self.assertEqual(0, placement.y)

    def test_negative_requests_clamp_to_origin_and_top(self):
        placement = resolve(612, 792, 153, 51, -40, -40, 200, 400)

        self.assertEqual(0, placement.x)
        self.assertEqual(792 - 51, placement.y)

    def test_image_larger_than_page_pins_to_zero(self):
        placement = resolve(100, 100, 150, 120, 30, 30, 200, 400)

        self.assertEqual(0, placement.x)
        self.assertEqual(0, placement.y)

    def test_result_always_inside_page(self):
        """Any request keeps the rectangle on a page the image fits on."""
        page_width, page_height, img_width, img_height = 595.0, 842.0, 148.75, 84.2
        for request_x in (-1e6, -1, 0, 123.4, 446.25, 500, 1e6):
            for request_y in (-1e6, -1, 0, 300.5, 757.8, 900, 1e6):
                with self.subTest(x=request_x, y=request_y):
                    placement = resolve(
                        page_width, page_height, img_width, img_height,
                        request_x, request_y, 200, 400,
                    )
                    self.assertGreaterEqual(placement.x, 0)
                    self.assertGreaterEqual(placement.y, 0)
                    self.assertLessEqual(placement.x, page_width - img_width)
                    self.assertLessEqual(placement.y, page_height - img_height)

    def test_resolve_is_deterministic(self):
        first = resolve(612, 792, 153, 51, 321.5, 77.25, 200, 400)
        second = resolve(612, 792, 153, 51, 321.5, 77.25, 200, 400)

        self.assertEqual(first, second)

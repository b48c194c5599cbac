import inspect
import unittest

from util import error_codes


class ErrorCodesTest(unittest.TestCase):

    def __constants(self) -> dict[str, int]:
        members = inspect.getmembers(error_codes)
        return {
            name: value
            for name, value in members
            if not name.startswith("_") and isinstance(value, int)
        }

    def test_no_duplicate_error_codes(self):
        seen: dict[int, str] = {}
        duplicates: list[str] = []
        for name, value in self.__constants().items():
            if value in seen:
                duplicates.append(f"{name}={value} duplicates {seen[value]}")
            else:
                seen[value] = name
        self.assertEqual(duplicates, [], f"Duplicate error codes found: {duplicates}")

    def test_error_codes_in_valid_category_ranges(self):
        valid_ranges = [
            (1000, 1999),  # Validation
            (2000, 2999),  # Not Found
            (8000, 8999),  # Internal
        ]
        for name, value in self.__constants().items():
            in_range = any(low <= value <= high for low, high in valid_ranges)
            self.assertTrue(in_range, f"{name}={value} is not in any valid category range")

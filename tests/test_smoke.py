import unittest

from json_diff_ng import DiffType, compare_strs, compare_values


class SmokeTest(unittest.TestCase):
    def test_compare_documents(self) -> None:
        left = '{"name": "svc", "tags": ["b", "a"], "meta": {"id": 1, "updated": "x"}}'
        right = '{"meta": {"updated": "y", "id": 1}, "tags": ["a", "b"], "name": "svc"}'

        result = compare_strs(left, right, True, ["^updated$"])
        self.assertTrue(result.is_empty())

        result = compare_strs(left, right)
        self.assertEqual(
            result.get_diffs(DiffType.MISMATCH),
            [
                '.tags.[0].("b" != "a")',
                '.tags.[1].("a" != "b")',
                '.meta.updated.("x" != "y")',
            ],
        )

    def test_report_rendering(self) -> None:
        result = compare_values({"a": 1, "b": [1]}, {"b": [1, 2], "c": None})
        self.assertEqual(
            result.render(),
            "Only in left:\n"
            "  .a.(1)\n"
            "\n"
            "Only in right:\n"
            "  .b.[1].(2)\n"
            "  .c.(null)",
        )


if __name__ == "__main__":
    unittest.main()

"""
Example comparing two versions of a service config.

Run this with:
    python examples/compare_configs.py
"""

from json_diff_ng import compare_values

OLD = {
    "service": "billing",
    "replicas": 3,
    "hosts": ["b.internal", "a.internal"],
    "auth": {"token": "abc", "issuer": "https://id.example.com"},
}

NEW = {
    "service": "billing",
    "replicas": 4,
    "hosts": ["a.internal", "b.internal", "c.internal"],
    "auth": {"token": "def", "issuer": "https://id.example.com"},
    "timeout_s": 30,
}


def main() -> None:
    print("=== Raw comparison ===")
    print(compare_values(OLD, NEW).render())
    print()

    # Host order does not matter and tokens rotate, so ignore both
    print("=== Sorted, token excluded ===")
    result = compare_values(OLD, NEW, sort_arrays=True, excluded_keys=["^token$"])
    print(result.render())


if __name__ == "__main__":
    main()

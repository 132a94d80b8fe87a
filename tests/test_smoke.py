"""Minimal smoke tests for the package namespace."""


def test_package_importable() -> None:
    """Ensure the top-level package exposes the expected namespace."""
    import cwe_sns_binding

    assert cwe_sns_binding.MutationPipeline is not None

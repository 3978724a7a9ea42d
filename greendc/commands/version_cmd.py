"""Version command - displays greendc version information."""

from greendc.version import GREENDC_VERSION


def run_version(verbose: bool = False) -> None:
    """Display greendc version information.

    Args:
        verbose: If True, show the full hash and release date.
    """
    if not verbose:
        print(f"greendc {GREENDC_VERSION}")
        return

    print(f"greendc version {GREENDC_VERSION.full_version()}")
    print("\nDetailed version information:")
    print(f"  Semantic Version: {GREENDC_VERSION}")
    print(f"  Release Date:     {GREENDC_VERSION.date_string()}")
    print(f"  Package Hash:     {GREENDC_VERSION.hash}")

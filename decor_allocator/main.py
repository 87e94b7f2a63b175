# decor_allocator/main.py
"""Main entry point for the decoration allocator"""
import sys
from typing import Dict, Any, List
from decor_allocator.config import CAP, CATALOG_FILE, REQUEST_FILE, OUTPUT_FILE
from decor_allocator.io import DataLoader, ResultSaver
from decor_allocator.allocation import AllocationEngine
from decor_allocator.analysis import RequestAnalyzer
from decor_allocator.utils import categorize_validation_issues, town_display_name


class OutputFormatter:
    """Formats and displays allocation results"""

    @staticmethod
    def print_results(output: Dict[str, Any]):
        """Pretty print allocation results"""
        print("\n" + "="*80)
        print("🏡 ALLOCATION RESULTS")
        print("="*80)

        OutputFormatter._print_metrics(output['metrics'], output['summary'])
        OutputFormatter._print_towns(output['metrics']['towns'])
        OutputFormatter._print_unused(output['unused'])
        OutputFormatter._print_warnings(output['warnings'])
        OutputFormatter._print_validation_issues(output['validation_issues'])

        print("\n" + "="*80)

    @staticmethod
    def _print_metrics(metrics: Dict, summary: Dict):
        """Print metrics section"""
        print(f"\n📊 METRICS ({summary['strategy']}):")
        print(f"   Assigned: {metrics['total_assigned']}/{metrics['total_requested']} decorations")
        print(f"   Unused: {metrics['total_unused']} decorations")
        if metrics['total_abandoned']:
            print(f"   Abandoned: {metrics['total_abandoned']} decorations")
        print(f"   Towns Used: {metrics['towns_used']}/{summary['total_towns']}")
        print(f"   Avg Utilization: {metrics['average_utilization']:.1%}")

    @staticmethod
    def _print_towns(towns: Dict[str, Dict]):
        """Print per-town totals, skipping towns with nothing placed"""
        for town, data in towns.items():
            if not data['items']:
                continue

            print(f"\n{town_display_name(town)}")
            print(f"   💚 Green: {data['green']}/{CAP}")
            print(f"   💙 Blue: {data['blue']}/{CAP}")
            print(f"   💗 Red: {data['red']}/{CAP}")
            print(f"   Balance spread: {data['balance_spread']}")
            for entry in data['decorations']:
                print(f"      {entry['quantity']}x {entry['name']}")

    @staticmethod
    def _print_unused(unused: Dict[str, int]):
        if unused:
            print(f"\n📦 UNUSED ({sum(unused.values())}):")
            print("-"*80)
            for name, count in unused.items():
                print(f"   {count}x {name}")

    @staticmethod
    def _print_warnings(warnings: List[str]):
        """Print warnings"""
        if warnings:
            print(f"\n⚠️  WARNINGS ({len(warnings)}):")
            print("-"*80)
            for warning in warnings:
                print(f"   • {warning}")

    @staticmethod
    def _print_validation_issues(issues: List[str]):
        """Print validation issues"""
        if not issues:
            print(f"\n✅ No validation issues found!")
            return

        breakdown = categorize_validation_issues(issues)
        print(f"\n❌ VALIDATION ISSUES ({len(issues)}):")
        print("-"*80)
        for category, count in breakdown.items():
            if count:
                print(f"   {category}: {count}")
        for issue in issues:
            print(f"   • {issue}")


def main(request_file: str = None, output_file: str = OUTPUT_FILE) -> int:
    """Main entry point"""
    if request_file is None:
        request_file = sys.argv[1] if len(sys.argv) > 1 else REQUEST_FILE

    # Load data
    print("📂 Loading data...")
    catalog = DataLoader.load_catalog(CATALOG_FILE)
    try:
        request = DataLoader.load_request(request_file, catalog)
    except FileNotFoundError:
        print(f"❌ Request file not found: {request_file}")
        raise SystemExit(1)

    analysis = RequestAnalyzer.analyze(request, catalog)
    print(f"   Decorations requested: {analysis['total_units']} "
          f"({analysis['valhalla_units']} Valhalla)")
    if analysis['unknown_decorations']:
        print(f"   ⚠️  Not in catalog, skipped: {', '.join(analysis['unknown_decorations'])}")

    # Run allocation
    engine = AllocationEngine(catalog)
    try:
        result = engine.allocate(request)
    except ValueError as e:
        print(f"❌ {e}")
        raise SystemExit(1)

    # Display and save results
    complete_output = engine.build_complete_output(request, result)
    OutputFormatter.print_results(complete_output)

    ResultSaver().save_results(complete_output, output_file)
    return 0


if __name__ == "__main__":
    main()

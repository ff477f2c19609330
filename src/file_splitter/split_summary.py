"""
Split Run Summary

Console view of a split run: what went in, which files came out.
"""

from datetime import datetime
from typing import List


class SplitSummary:
    """Console summary of a split run"""

    def __init__(self, quiet_mode: bool = False):
        self.quiet_mode = quiet_mode
        self.start_time = datetime.now()

    def print_header(self, input_pattern: str, output_folder: str):
        """Print clean header"""
        if not self.quiet_mode:
            print("\n" + "=" * 80)
            print("✂️  FILE SPLITTER")
            print("=" * 80)
            print(f"📥 Input:  {input_pattern}")
            print(f"📤 Output: {output_folder}")
            print(f"⏰ Started: {self.start_time.strftime('%Y-%m-%d %H:%M:%S')}")
            print("=" * 80)

    def print_split_results(self, split_results: List):
        """Print one line per input file"""
        if self.quiet_mode:
            return

        for result in split_results:
            name = result.input_file.name
            print(f"📋 {name:<40} {result.data_lines:>8} lines → {len(result.output_files):<4} files")

            # Show first and last output file
            if result.output_files:
                print(f"   • {result.output_files[0].name}")
                if len(result.output_files) > 1:
                    print(f"   • ... {result.output_files[-1].name}")

    def print_footer(self, success: bool, total_duration: float):
        """Print clean footer with results"""
        if not self.quiet_mode:
            end_time = datetime.now()
            print("\n" + "=" * 80)

            if success:
                print("✅ SPLIT COMPLETED SUCCESSFULLY")
                print(f"⏱️  Total time: {total_duration:.2f} seconds")
                print(f"🏁 Finished: {end_time.strftime('%Y-%m-%d %H:%M:%S')}")
            else:
                print("❌ SPLIT FAILED")
                print("📝 Check the log for detailed error information")

            print("=" * 80)

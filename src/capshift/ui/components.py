"""
UI components for the caption tool
Handles display formatting of command results
"""

from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from capshift.core.caption import Caption
from capshift.core.time_value import TimeValue
from capshift.core.timing import AdjustmentResult


class UIComponents:
    """Reusable UI components for the CLI"""

    def __init__(self, console: Console):
        self.console = console

    def show_error(self, message: str):
        """Print an error panel"""
        self.console.print(Panel(escape(message), style="red"))

    def show_warning(self, message: str):
        """Print a warning panel"""
        self.console.print(Panel(escape(message), style="yellow"))

    def show_success(self, message: str):
        """Print a success panel"""
        self.console.print(Panel(escape(message), style="green"))

    def show_caption_summary(self, filename: str, caption: Caption) -> Table:
        """Create a table summarizing a caption file"""
        table = Table(title=f"Caption Summary: {filename}", box=box.ROUNDED)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Blocks", str(len(caption)))
        table.add_row("Header", "Yes" if caption.header is not None else "No")

        speakers = caption.speakers()
        table.add_row("Speakers", escape(", ".join(speakers)) if speakers else "-")

        if caption.blocks:
            table.add_row("First Time", str(caption.first_time()))
            table.add_row("Last Time", str(caption.last_time()))
            table.add_row("Duration", f"{caption.duration() / 1000:.3f}s")

        return table

    def show_timing_adjustment_results(
        self, input_file: str, result: AdjustmentResult
    ) -> Table:
        """Create a table showing timing adjustment results"""
        table = Table(title="Timing Adjustment Complete", box=box.ROUNDED)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green")

        offset_seconds = result.offset_ms / 1000
        direction = "Forward" if result.offset_ms >= 0 else "Backward"

        table.add_row("Original File", input_file)
        table.add_row("Adjusted File", str(result.output_path))
        if result.backup_path is not None:
            table.add_row("Backup Created", str(result.backup_path))
        table.add_row("Entries Processed", str(result.entries_processed))
        table.add_row("Time Adjustment", f"{abs(offset_seconds):.3f}s {direction}")
        table.add_row("Offset (ms)", f"{result.offset_ms:+d}")

        return table

    def show_crop_results(
        self,
        output_file: str,
        total_entries: int,
        kept_entries: int,
        start: Optional[TimeValue],
        end: Optional[TimeValue],
    ) -> Table:
        """Create a table showing crop results"""
        table = Table(title="Crop Complete", box=box.ROUNDED)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Output File", output_file)
        table.add_row("Window Start", str(start) if start is not None else "(open)")
        table.add_row("Window End", str(end) if end is not None else "(open)")
        table.add_row("Total Entries", str(total_entries))
        table.add_row("Kept Entries", str(kept_entries))

        return table

    def show_concatenation_results(
        self, inputs: List[Tuple[str, int]], output_file: str, caption: Caption
    ) -> Table:
        """Create a table showing which files were joined"""
        table = Table(
            title=f"Concatenated {len(inputs)} files into {output_file}", box=box.ROUNDED
        )
        table.add_column("Source File", style="yellow")
        table.add_column("Blocks", style="cyan", justify="right")

        for filename, block_count in inputs:
            table.add_row(filename, str(block_count))

        if caption.blocks:
            table.add_row("[bold]Total[/bold]", f"[bold]{len(caption)}[/bold]")

        return table

    def show_conversion_results(
        self, source_file: str, output_file: str, block_count: int
    ) -> Table:
        """Create a table showing format conversion results"""
        table = Table(title="Conversion Results", box=box.ROUNDED)
        table.add_column("Source File", style="yellow")
        table.add_column("Output File", style="green")
        table.add_column("Blocks", style="cyan", justify="right")

        table.add_row(source_file, output_file, str(block_count))

        return table

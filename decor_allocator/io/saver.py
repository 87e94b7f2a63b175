# decor_allocator/io/saver.py
"""Data saving functionality"""
import json
import os
from typing import Dict, Any, List
from decor_allocator.utils import ensure_directory, format_timestamp


class ResultSaver:
    """Handles saving of allocation results and form input"""

    @staticmethod
    def _write_json(data: Any, filepath: str) -> None:
        ensure_directory(os.path.dirname(filepath))
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    def save_results(self, complete_output: Dict[str, Any], output_file: str) -> None:
        """Save final allocation results to file"""
        complete_output = dict(complete_output)
        complete_output.setdefault('timestamp', format_timestamp())
        self._write_json(complete_output, output_file)
        print(f"\n💾 Results saved to {output_file}")

    def save_user_data(self, towns: List[str], quantities: Dict[str, int],
                       user_data_file: str, valhalla_only: bool = False,
                       strategy: str = None) -> None:
        """Remember form input for the next visit"""
        user_data = {
            'towns': list(towns),
            'quantities': dict(quantities),
            'valhalla_only': valhalla_only,
            'strategy': strategy,
        }
        self._write_json(user_data, user_data_file)

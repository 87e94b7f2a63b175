# decor_allocator/io/loader.py
"""Data loading functionality"""
import json
import os
from typing import Any, Dict, Optional
from decor_allocator.models import Catalog, AllocationRequest


class DataLoader:
    """Handles loading of catalog, request and saved form data"""

    @staticmethod
    def load_json(filepath: str) -> Any:
        """Load JSON file"""
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)

    @staticmethod
    def load_catalog(catalog_file: str) -> Catalog:
        """Load the decoration catalog from a JSON list of records"""
        return Catalog.from_records(DataLoader.load_json(catalog_file))

    @staticmethod
    def load_request(request_file: str, catalog: Catalog = None) -> AllocationRequest:
        """Load an allocation request; missing catalog entries default to zero"""
        request = AllocationRequest.from_dict(DataLoader.load_json(request_file))

        if catalog is not None:
            for name in catalog.names():
                request.quantities.setdefault(name, 0)

        print(f"Loaded request for {len(request.towns)} towns and "
              f"{sum(request.quantities.values())} decorations ({request.strategy})")

        return request

    @staticmethod
    def load_user_data(user_data_file: str) -> Optional[Dict[str, Any]]:
        """Load the last saved form input, or None if nothing was saved"""
        if not os.path.exists(user_data_file):
            return None
        data = DataLoader.load_json(user_data_file)
        return {
            'towns': data.get('towns', []),
            'quantities': data.get('quantities', {}),
            'valhalla_only': data.get('valhalla_only', False),
            'strategy': data.get('strategy'),
        }

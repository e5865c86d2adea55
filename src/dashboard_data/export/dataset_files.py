"""
Dataset File Export

Writes the generated dashboard dataset as Parquet tables (one per
collection) plus a single JSON document in the shape the dashboard reads.
"""

import json
import logging
import os
from datetime import date
from typing import Dict, List

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from dashboard_data.generator.entities import Dataset
from dashboard_data.models import model_summaries

logger = logging.getLogger(__name__)


def dataset_frames(dataset: Dataset) -> Dict[str, pd.DataFrame]:
    """Build one DataFrame per collection, keeping the dataset's record order."""
    return {
        'vendors': pd.DataFrame([v.to_dict() for v in dataset.vendors]),
        'spend_history': pd.DataFrame([entry.to_dict() for entry in dataset.spend_history]),
        'contracts': pd.DataFrame([c.to_dict() for c in dataset.contracts]),
    }


def save_to_parquet(data: List, output_path: str, data_type: str) -> None:
    """Convert data objects to Parquet format."""
    records = [item.to_dict() for item in data]
    df = pd.DataFrame(records)
    table = pa.Table.from_pandas(df, preserve_index=False)
    pq.write_table(table, output_path, compression="snappy")
    logger.info(f"✅ Saved {len(data)} {data_type} records to: {output_path}")


def export_single_json(dataset: Dataset, output_path: str) -> str:
    """
    Export the whole dataset to a single JSON file.

    Args:
        dataset: Dataset to export
        output_path: Full path for output file

    Returns:
        Path to created file
    """
    os.makedirs(os.path.dirname(output_path) or '.', exist_ok=True)

    output = {'generated_at': date.today().isoformat()}
    output.update(dataset.to_dict())

    with open(output_path, 'w') as f:
        json.dump(output, f, indent=2, default=str)

    logger.info(f"✅ Exported dataset to {output_path}")
    return output_path


def export_dataset(dataset: Dataset, output_dir: str) -> List[str]:
    """
    Write vendors, spend history and contracts as Parquet plus dataset.json
    and the model summaries as models.json.

    Args:
        dataset: Dataset to export
        output_dir: Directory for the files (created if missing)

    Returns:
        List of created file paths
    """
    logger.info(f"📦 Exporting dashboard dataset to {output_dir}...")
    os.makedirs(output_dir, exist_ok=True)

    created_files = []
    for name, records in (('vendors', dataset.vendors),
                          ('spend_history', dataset.spend_history),
                          ('contracts', dataset.contracts)):
        path = os.path.join(output_dir, f"{name}.parquet")
        save_to_parquet(records, path, name)
        created_files.append(path)

    created_files.append(export_single_json(dataset, os.path.join(output_dir, "dataset.json")))

    models_path = os.path.join(output_dir, "models.json")
    with open(models_path, 'w') as f:
        json.dump(model_summaries(), f, indent=2)
    created_files.append(models_path)

    logger.info(f"📋 Created {len(created_files)} files in {output_dir}")
    return created_files

import sys

from utils.repository import DataRepository

# Output directory (defaults to data/)
data_dir = sys.argv[1] if len(sys.argv) > 1 else 'data'

repo = DataRepository.from_sample_data()
frames = repo.to_dataframes()

# Display the results
for name, df in frames.items():
    print(f"{name}: {len(df)} rows")
print("\nFirst 5 work assignments:")
print(frames['work_assignments'].head(5))

# Write the snapshot to CSV
path = repo.export_to_csv(data_dir)
print(f"\n✅ Written sample snapshot to {path}/")

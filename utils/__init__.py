# Utils package initialization
from .repository import DataRepository
from .data_processor import DataProcessor
from .sample_data import generate_sample_data

__all__ = ['DataRepository', 'DataProcessor', 'generate_sample_data']

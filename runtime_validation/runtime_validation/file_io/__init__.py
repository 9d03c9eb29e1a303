from .document_loader import DocumentLoader
from .source_location import SourceLocation, format_source, lookup_source

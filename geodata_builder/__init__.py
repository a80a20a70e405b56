"""Builds the binary area code to location data used by a phone number
geocoder from human-edited text tables."""

from .area_code_map import AreaCodeMap
from .area_code_table import AreaCodeTable
from .errors import (AmbiguousDescriptorError, ConfigurationError,
                     CorruptDataError, DuplicatePrefixError, GeoDataError,
                     MalformedLineError, MissingLocationError,
                     NoMatchingDescriptorError, UnorderedTableError)
from .language_index import LanguageIndex, add_configuration_mapping
from .mapping_file_provider import MappingFileProvider
from .splitter import FileDescriptor, split_map
from .text_mapping import parse

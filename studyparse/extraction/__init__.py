from studyparse.extraction.container import ContainerUnpacker
from studyparse.extraction.pdf_stream import PdfStreamTextExtractor
from studyparse.extraction.pipeline import DocumentTextExtractionPipeline, build_pipeline
from studyparse.extraction.xml_runs import XmlTextRunExtractor

__all__ = [
    "ContainerUnpacker",
    "DocumentTextExtractionPipeline",
    "PdfStreamTextExtractor",
    "XmlTextRunExtractor",
    "build_pipeline",
]

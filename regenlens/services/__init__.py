"""Service layer composing the analysis primitives into per-request workflows."""

from importlib import import_module

__all__ = [
    "SatelliteAnalysisService",
    "TemplateNarrative",
    "build_analysis_report",
    "build_analysis_report_async",
    "SAMPLE_REGIONS",
    "get_region",
]


def __getattr__(name):
    if name == "SatelliteAnalysisService":
        return import_module(".satellite", __name__).SatelliteAnalysisService
    if name == "TemplateNarrative":
        return import_module(".narrative", __name__).TemplateNarrative
    if name == "build_analysis_report":
        return import_module(".report", __name__).build_analysis_report
    if name == "build_analysis_report_async":
        return import_module(".report", __name__).build_analysis_report_async
    if name == "SAMPLE_REGIONS":
        return import_module(".regions", __name__).SAMPLE_REGIONS
    if name == "get_region":
        return import_module(".regions", __name__).get_region
    raise AttributeError(name)

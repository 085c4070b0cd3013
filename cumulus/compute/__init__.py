from cumulus.compute.options import TemplateOptions

__all__ = ["TemplateOptions"]

from .component import bowtie_flow

__all__ = ["bowtie_flow"]

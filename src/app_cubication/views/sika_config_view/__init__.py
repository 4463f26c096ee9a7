from .views import SikaConfigDetailAPIView, SikaConfigListAPIView

__all__ = ["SikaConfigListAPIView", "SikaConfigDetailAPIView"]

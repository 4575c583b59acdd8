from certificate_maker.certificates.router import router

__all__ = ["router"]

from spinwin.models.spin import Spin

__all__ = ["Spin"]

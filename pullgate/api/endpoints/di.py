from typing import Annotated

from fastapi import Depends

from pullgate.api.di import DiContainer

Di = Annotated[DiContainer, Depends()]

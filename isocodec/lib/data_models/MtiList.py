from typing import Annotated
from pydantic import RootModel, StringConstraints


MessageTypeIndicator = Annotated[str, StringConstraints(pattern=r"^\d{4}$")]


class MtiList(RootModel[list[MessageTypeIndicator]]):
    def __contains__(self, mti: str) -> bool:
        return mti in self.root

    def __len__(self) -> int:
        return len(self.root)

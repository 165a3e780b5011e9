"""Models for Aptos accounts and full node responses."""

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, RootModel, StringConstraints

HexAddress = Annotated[str, StringConstraints(pattern=r"^0x[0-9a-fA-F]{1,64}$")]
HexString = Annotated[str, StringConstraints(pattern=r"^0x[0-9a-fA-F]*$")]
U64 = Annotated[str, StringConstraints(pattern=r"^\d+$")]

class AptosModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

class AptosAccount(AptosModel):
    """A locally generated key pair and its derived address"""

    address: HexAddress
    private_key: Optional[HexString] = None
    public_key: Optional[HexString] = None

class AccountInfo(AptosModel):
    sequence_number: U64
    authentication_key: HexString

class Coin(AptosModel):
    value: U64

class CoinStoreData(AptosModel):
    coin: Coin

class CoinStore(AptosModel):
    type: str
    data: CoinStoreData

class Transaction(AptosModel):
    type: str
    hash: HexString
    version: Optional[U64] = None
    success: Optional[bool] = None
    vm_status: Optional[str] = None
    sender: Optional[HexAddress] = None
    sequence_number: Optional[U64] = None
    timestamp: Optional[U64] = None

class FaucetHashes(RootModel[List[str]]):
    pass

class NodeError(AptosModel):
    """Error body returned by the full node"""

    message: str
    error_code: Optional[str] = None
    vm_error_code: Optional[int] = None

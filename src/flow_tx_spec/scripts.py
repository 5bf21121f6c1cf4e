"""Cadence transaction templates used by the fixtures.

Only add-key, create-account and token-transfer are approved templates on
the signing device; the hello-world script is deliberately unapproved.
"""

TX_HELLO_WORLD = "transaction(msg: String) { execute { log(msg) } }"

TX_ADD_NEW_KEY = """transaction(publicKey: String) {
prepare(signer: AuthAccount) {
signer.addPublicKey(publicKey.decodeHex())
}
}"""

TX_CREATE_ACCOUNT = """transaction(publicKeys: [String]) {
prepare(signer: AuthAccount) {
let acct = AuthAccount(payer: signer)
for key in publicKeys {
acct.addPublicKey(key.decodeHex())
}
}
}"""

TX_TRANSFER_TOKENS = """import FungibleToken from 0xee82856bf20e2aa6
transaction(amount: UFix64, to: Address) {
let vault: @FungibleToken.Vault
prepare(signer: AuthAccount) {
self.vault <- signer
.borrow<&{FungibleToken.Provider}>(from: /storage/flowTokenVault)!
.withdraw(amount: amount)
}
execute {
getAccount(to)
.getCapability(/public/flowTokenReceiver)!
.borrow<&{FungibleToken.Receiver}>()!
.deposit(from: <-self.vault)
}
}"""

"""
Lesson content for blockchain development (Solidity, Web3, Ethereum).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

BLOCKCHAIN_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is used for blockchain and smart contract development.", "syntax": "Blockchain programming", "usage": "Build decentralized applications", "code": "// SPDX-License-Identifier: MIT\npragma solidity ^0.8.20;\n\ncontract Hello {\n    string public greeting = \"Hello, chain!\";\n}"},
    {"title": "How Blockchains Work", "description": "Blocks of transactions are chained by hashes and agreed on by a network of nodes.", "syntax": "block = { prevHash, transactions, nonce }", "usage": "Understand the platform", "code": "block 101: prev=0xab12.. txs=[alice->bob 1 ETH]\nblock 102: prev=0xcd34.. txs=[bob->carol 0.5 ETH]"},
    {"title": "State Variables and Types", "description": "Contracts store state on-chain in typed variables.", "syntax": "uint256, address, bool, mapping(K => V)", "usage": "Persistent contract data", "code": "contract Bank {\n    mapping(address => uint256) public balances;\n    address public owner;\n}"},
    {"title": "Functions and Modifiers", "description": "Functions change or read state; modifiers add reusable checks.", "syntax": "function f() public payable onlyOwner { }", "usage": "Contract behaviour", "code": "modifier onlyOwner() {\n    require(msg.sender == owner, \"not owner\");\n    _;\n}\n\nfunction deposit() public payable {\n    balances[msg.sender] += msg.value;\n}"},
    {"title": "Events", "description": "Events write logs that front ends can subscribe to.", "syntax": "event Name(args); emit Name(args);", "usage": "Notify off-chain listeners", "code": "event Deposited(address indexed from, uint256 amount);\n\nfunction deposit() public payable {\n    balances[msg.sender] += msg.value;\n    emit Deposited(msg.sender, msg.value);\n}"},
    {"title": "Security Basics", "description": "Check-effects-interactions, access control and overflow checks prevent common exploits.", "syntax": "require, checks-effects-interactions", "usage": "Safe contracts", "code": "function withdraw(uint256 amount) public {\n    require(balances[msg.sender] >= amount, \"insufficient\");\n    balances[msg.sender] -= amount;\n    (bool ok, ) = msg.sender.call{value: amount}(\"\");\n    require(ok, \"transfer failed\");\n}"},
    {"title": "Talking to Contracts from JavaScript", "description": "Libraries such as ethers.js connect a web page to a wallet and a contract.", "syntax": "new ethers.Contract(address, abi, signer)", "usage": "Build dApp front ends", "code": "const provider = new ethers.BrowserProvider(window.ethereum);\nconst signer = await provider.getSigner();\nconst bank = new ethers.Contract(address, abi, signer);\nawait bank.deposit({ value: ethers.parseEther(\"0.1\") });"},
    {"title": "Project: Token", "description": "Write, test and deploy a simple fungible token with {name}.", "syntax": "N/A", "usage": "Apply all concepts", "code": "contract SimpleToken {\n    mapping(address => uint256) public balanceOf;\n    event Transfer(address indexed from, address indexed to, uint256 value);\n\n    constructor(uint256 supply) {\n        balanceOf[msg.sender] = supply;\n    }\n\n    function transfer(address to, uint256 value) external returns (bool) {\n        require(balanceOf[msg.sender] >= value, \"balance\");\n        balanceOf[msg.sender] -= value;\n        balanceOf[to] += value;\n        emit Transfer(msg.sender, to, value);\n        return true;\n    }\n}"},
)


def blockchain_specs(name: str) -> list[SectionSpec]:
    return lessons(name, BLOCKCHAIN_LESSONS)
